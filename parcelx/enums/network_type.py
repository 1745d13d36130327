from enum import Enum


class NetworkType(str, Enum):
    """Blockchain networks a payment wallet can receive on"""

    ERC20 = "ERC20"
    TRC20 = "TRC20"
    BEP20 = "BEP20"
    BTC = "BTC"
    SOL = "SOL"
    POLYGON = "POLYGON"
    AVAX = "AVAX"
    ARB = "ARB"
    OP = "OP"
    BASE = "BASE"
