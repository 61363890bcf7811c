"""
==============================================================
Selection metrics for finding the FDR tranches of VariantDatum
==============================================================

A selection metric turns a requested tranche value into a target statistic
and precomputes, over the lod-sorted data, the running statistic of all the
variants with score >= data[i].lod.

Author: Shujia Huang
Date  : 2014-05-23 11:21:53
"""
import numpy as np


def FdrToTiTv(desiredFDR, targetTiTv):
    """
    Map a false discovery rate (in percent) to the Ti/Tv ratio expected at
    that FDR. 0.5 is the Ti/Tv of purely random substitutions.
    """
    return (1.0 - desiredFDR / 100.0) * (targetTiTv - 0.5) + 0.5


def _ReverseCumsum(x):
    """Cumulative sum from the last element toward the first one."""
    return np.cumsum(x[::-1])[::-1]


class SelectionMetric(object):

    def __init__(self, name):
        self.name = name
        self.runningMetric = None

    def GetName(self):
        return self.name

    def GetThreshold(self, tranche):
        raise NotImplementedError

    def GetTarget(self):
        raise NotImplementedError

    def CalculateRunningMetric(self, data):
        raise NotImplementedError

    def GetRunningMetric(self, i):
        return self.runningMetric[i]

    def DatumValue(self, d):
        raise NotImplementedError


class NovelTiTvMetric(SelectionMetric):

    def __init__(self, target):
        super(NovelTiTvMetric, self).__init__('NovelTiTv')
        self.targetTiTv = target

    def GetThreshold(self, tranche):
        return FdrToTiTv(tranche, self.targetTiTv)

    def GetTarget(self):
        return self.targetTiTv

    def CalculateRunningMetric(self, data):
        """
        Running Ti/Tv of the novel calls, scanning from the best score down.
        Known calls do not move the counts but still get the running value
        of the novel calls above them.
        """
        novel = np.array([not d.isKnown for d in data], dtype=bool)
        isTi = np.array([bool(d.isTransition) for d in data], dtype=bool)

        ti = _ReverseCumsum((novel & isTi).astype(float))
        tv = _ReverseCumsum((novel & ~isTi).astype(float))

        self.runningMetric = ti / np.maximum(tv, 1.0)
        return self

    def DatumValue(self, d):
        return 1 if d.isTransition else 0


class TruthSensitivityMetric(SelectionMetric):
    """
    ``nTrueSites`` must be > 0, otherwise the running metric is inf/NaN.
    """

    def __init__(self, nTrueSites):
        super(TruthSensitivityMetric, self).__init__('TruthSensitivity')
        self.nTrueSites = nTrueSites

    def GetThreshold(self, tranche):
        return 1.0 - tranche / 100.0  # tranche of 1 => 99% sensitivity target

    def GetTarget(self):
        return 1.0

    def CalculateRunningMetric(self, data):
        atTruth = np.array([bool(d.atTruthSite) for d in data], dtype=float)
        nCalledAtTruth = _ReverseCumsum(atTruth)

        with np.errstate(divide='ignore', invalid='ignore'):
            self.runningMetric = 1.0 - nCalledAtTruth / float(self.nTrueSites)

        return self

    def DatumValue(self, d):
        return 1 if d.atTruthSite else 0
