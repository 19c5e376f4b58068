"""
Copyright (c) 2019-2020, the NeoTx developers
See LICENSE for details
"""


class NeoError(Exception):
    pass
