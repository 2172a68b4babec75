# ============================================================
# CONFIG + command line
# - Fixed display / canvas constants
# - Argument parsing returns a tagged result and never raises
# ============================================================

from dataclasses import dataclass, replace
from typing import Optional

# --------------------------- CONFIG ---------------------------
WINDOW_W, WINDOW_H   = 1080, 720        # preview window size (px)
IMAGE_MAX_DIMENSION  = 256              # target is fit into this box
TEMPLATE_DIVISOR     = 5                # template cap = IMAGE_MAX_DIMENSION / 5
SCALING              = 2                # preview magnification
BURST_BUDGET_S       = 0.016            # optimisation time per display frame
REPORT_EVERY         = 100              # progress line every N accepted mutations

DEFAULT_INPUT        = "./assets/target.png"
DEFAULT_SPRITE       = "./assets/sprite.png"
DEFAULT_OUTPUT       = "output.png"
DEFAULT_DNA          = 500

USAGE = (
    "Usage: {prog} [options]\n"
    "Options:\n"
    "  -i, --input <path>   Path to source image (default: ./assets/target.png)\n"
    "  -s, --sprite <path>  Path to sprite image (default: ./assets/sprite.png)\n"
    "  -o, --output <path>  Path to save result (default: output.png)\n"
    "  -d, --dna <number>   Number of shapes to draw (default: 500)\n"
    "  -h, --help           Show this message and exit\n"
)


@dataclass(frozen=True)
class Config:
    input_path: str = DEFAULT_INPUT
    sprite_path: str = DEFAULT_SPRITE
    output_path: str = DEFAULT_OUTPUT
    dna_length: int = DEFAULT_DNA


@dataclass(frozen=True)
class ParseResult:
    config: Config
    error: Optional[str] = None
    show_help: bool = False

    @property
    def ok(self):
        return self.error is None and not self.show_help


_VALUE_FLAGS = {
    "-i": "input_path", "--input": "input_path",
    "-s": "sprite_path", "--sprite": "sprite_path",
    "-o": "output_path", "--output": "output_path",
    "-d": "dna_length", "--dna": "dna_length",
}


def parse_dna(text):
    try:
        n = int(text)
    except ValueError:
        return None, f"invalid DNA length: {text!r} is not an integer"
    if n < 0:
        return None, f"invalid DNA length: {n} is negative"
    return n, None


def parse_arguments(argv):
    """Parse argv (without program name).

    Unknown flags are skipped, a value flag with nothing after it is
    skipped, and parsing stops at the first help flag or bad DNA value.
    """
    config = Config()
    i = 0
    while i < len(argv):
        arg = argv[i]
        if arg in ("-h", "--help"):
            return ParseResult(config, show_help=True)
        field_name = _VALUE_FLAGS.get(arg)
        if field_name is not None and i + 1 < len(argv):
            i += 1
            value = argv[i]
            if field_name == "dna_length":
                value, err = parse_dna(value)
                if err:
                    return ParseResult(config, error=err)
            config = replace(config, **{field_name: value})
        i += 1
    return ParseResult(config)


def template_max_dimension():
    return IMAGE_MAX_DIMENSION / TEMPLATE_DIVISOR
