from enum import Enum


class OptionType(str, Enum):
    """European contract paid at maturity.

    Attributes
    ----------
    CALL : str
        ``max(S_T - K, 0)`` ("call").
    PUT : str
        ``max(K - S_T, 0)`` ("put").
    DIGITAL_CALL : str
        Cash-or-nothing call paying 1 if ``S_T > K`` ("digital_call").
    """

    CALL = "call"
    PUT = "put"
    DIGITAL_CALL = "digital_call"
