"""
===============================================
===============================================
Author: Shujia Huang
Date  : 2014-05-23 11:21:53
"""
# My own class
from ..log import logger
from . import selection_metric as sm
from . import tranche as tr
from . import tranche_manager as tm
from . import variant_recalibrator_argument_collection as VRAC


class VariantRecalibrator(object):

    def __init__ (self, vrac=None):

        self.VRAC = VRAC.VariantRecalibratorArgumentCollection()
        if vrac:
            self.VRAC = vrac

        self.tranches = []

    def SelectionMetric(self, data):

        if self.VRAC.SELECTION_METRIC == 'TruthSensitivity':
            nCallsAtTruth = tm.CountCallsAtTruth(data, float('-inf'))
            logger.info('Found %d variants at truth sites' % nCallsAtTruth)
            return sm.TruthSensitivityMetric(nCallsAtTruth)

        if self.VRAC.SELECTION_METRIC == 'NovelTiTv':
            return sm.NovelTiTvMetric(self.VRAC.TARGET_TITV)

        raise ValueError('[ERROR] Unknown selection metric "%s". It should be '
                         'one of TruthSensitivity or NovelTiTv' %
                         self.VRAC.SELECTION_METRIC)

    def OnTraversalDone(self, data):
        """
        Find the lod cutoff values which correspond to the tranches of
        calls requested in VRAC.TS_TRANCHES.
        """
        if len(data) == 0:
            raise ValueError('[ERROR] No data found. The size is 0')

        metric = self.SelectionMetric(data)
        self.tranches = tm.FindTranches(data, self.VRAC.TS_TRANCHES, metric,
                                        self.VRAC.MODE,
                                        self.VRAC.TRANCHES_DEBUG_FILE)

        if len(self.tranches) < len(self.VRAC.TS_TRANCHES):
            logger.warning('Only %d of the %d requested tranches could be '
                           'found' % (len(self.tranches),
                                      len(self.VRAC.TS_TRANCHES)))

        if self.VRAC.TRANCHES_FILE:
            tr.WriteTranchesFile(self.tranches, self.VRAC.TRANCHES_FILE)

        return self.tranches
