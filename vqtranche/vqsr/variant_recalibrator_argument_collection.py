"""
====================================
====================================
Author : Shujia Huang
Date   : 2014-05-21 18:03:28

"""
from enum import Enum


class Mode(Enum):
    SNP = 'SNP'
    INDEL = 'INDEL'

    def __str__(self):
        return self.value


class VariantRecalibratorArgumentCollection(object):

    def __init__ (self):
        self.MODE             = Mode.SNP
        self.TS_TRANCHES      = [100.0, 99.9, 99.0, 90.0]
        self.TARGET_TITV      = 2.15 # Expected novel Ti/Tv of a clean call set

        # 'TruthSensitivity' or 'NovelTiTv'
        self.SELECTION_METRIC = 'TruthSensitivity'

        self.TRANCHES_FILE       = None
        self.TRANCHES_DEBUG_FILE = None
