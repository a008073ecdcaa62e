from .errors import (
    SteamToolboxError,
    OutOfRangeError,
    DivergentError,
    NonConvergentError,
    InvalidInputError,
    ChokedFlowError,
)
