# ============================================================
# Error types raised by the stamp painter.
# Startup errors are fatal; only OutputSaveError is survivable.
# ============================================================


class StampPainterError(Exception):
    pass


class ResourceLoadError(StampPainterError):
    """Target or template image missing or undecodable."""


class RenderSurfaceError(StampPainterError):
    """Scratch surface of the requested size could not be allocated."""


class RenderContractError(StampPainterError):
    """Rendered buffer does not match the target's dimensions."""


class OutputSaveError(StampPainterError):
    pass
