from enum import Enum

from ci_filter.models import StepName


class UIStyle(str, Enum):
    BLUE = "blue"
    GREEN = "green"
    YELLOW = "yellow"
    CYAN = "cyan"
    MAGENTA = "magenta"
    DIM = "dim"
    WHITE = "white"


STEP_STYLE = {
    StepName.BUILD: UIStyle.GREEN.value,
    StepName.BREAKING_CHANGE: UIStyle.MAGENTA.value,
    StepName.DEPENDENCY: UIStyle.MAGENTA.value,
    StepName.HELP: UIStyle.MAGENTA.value,
    StepName.SIGNATURE: UIStyle.MAGENTA.value,
    StepName.TEST: UIStyle.CYAN.value,
}
