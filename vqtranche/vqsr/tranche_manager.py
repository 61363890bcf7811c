"""
===============================================
Find the FDR tranches for a list of VariantDatum
===============================================

The data is sorted ascending by lod, the running metric is computed once
from the best score down to the worst, and then each requested tranche
value is resolved to the loosest lod cutoff which still satisfies it.

Author: Shujia Huang
Date  : 2014-05-23 11:21:53
"""
import numpy as np

from .. import utils
from ..log import logger
from .tranche import Tranche


def FindTranches(data, trancheThresholds, metric, mode, debugFile=None):
    """
    Return the list of Tranche for ``trancheThresholds``, in the same order.

    If the first threshold can not be reached ValueError is raised. A later
    unreachable threshold stops the search and the tranches found so far
    are returned.
    """
    logger.info('Finding %d tranches for %d variants' %
                (len(trancheThresholds), len(data)))

    data = SortByLod(data)
    metric.CalculateRunningMetric(data)

    if debugFile:
        WriteTranchesDebuggingInfo(debugFile, data, metric)

    tranches = []
    for trancheThreshold in trancheThresholds:
        t = FindTranche(data, metric, trancheThreshold, mode)

        if t is None:
            if len(tranches) == 0:
                raise ValueError('[ERROR] Couldn\'t find any tranche containing '
                                 'variants with a %s > %.2f. Are you sure the '
                                 'truth files contain unfiltered variants '
                                 'which overlap the input data?' %
                                 (metric.GetName(),
                                  metric.GetThreshold(trancheThreshold)))
            break

        tranches.append(t)

    return tranches


def SortByLod(data):
    """
    Return a new list of ``data`` sorted ascending by lod. The sort is
    stable so ties keep their input order.
    """
    lods = np.array([d.lod for d in data], dtype=float)
    return [data[i] for i in np.argsort(lods, kind='mergesort')]


def WriteTranchesDebuggingInfo(fileName, data, metric):

    try:
        O = utils.Open(fileName, 'w')
    except IOError as e:
        raise IOError('[ERROR] Could not create output file %s: %s' %
                      (fileName, e))

    with O:
        O.write('Qual metricValue runningValue\n')
        for i, d in enumerate(data):
            O.write('%.4f %d %.4f\n' % (d.lod, metric.DatumValue(d),
                                        metric.GetRunningMetric(i)))

    logger.info('Tranches debugging information written to %s' % fileName)


def FindTranche(data, metric, trancheThreshold, mode):
    """
    ``data`` must be sorted by lod and the running metric of ``metric`` must
    have been calculated on it. Return None if no variant reaches the metric
    threshold.
    """
    metricThreshold = metric.GetThreshold(trancheThreshold)
    logger.info('  Tranche threshold %.2f => selection metric threshold %.3f' %
                (trancheThreshold, metricThreshold))

    for i in range(len(data)):
        if metric.GetRunningMetric(i) >= metricThreshold:
            # The largest group of variants which reaches the target
            t = TrancheOfVariants(data, i, trancheThreshold, mode)
            logger.info('  Found tranche for %.3f: %.3f threshold starting '
                        'with variant %d; running score is %.3f ' %
                        (trancheThreshold, metricThreshold, i,
                         metric.GetRunningMetric(i)))
            logger.info('  Tranche is %s' % t)
            return t

    return None


def TrancheOfVariants(data, minI, ts, mode):

    numKnown, numNovel, knownTi, knownTv, novelTi, novelTv = 0, 0, 0, 0, 0, 0

    # Ties at minLod may sit below minI, so scan all the data.
    minLod = data[minI].lod
    for d in data:
        if d.lod < minLod:
            continue

        if d.isKnown:
            numKnown += 1
            if d.isSNP:
                if d.isTransition:
                    knownTi += 1
                else:
                    knownTv += 1
        else:
            numNovel += 1
            if d.isSNP:
                if d.isTransition:
                    novelTi += 1
                else:
                    novelTv += 1

    knownTiTv = knownTi / max(1.0 * knownTv, 1.0)
    novelTiTv = novelTi / max(1.0 * novelTv, 1.0)

    accessibleTruthSites = CountCallsAtTruth(data, float('-inf'))
    nCallsAtTruth = CountCallsAtTruth(data, minLod)

    return Tranche(ts, minLod, numKnown, knownTiTv, numNovel, novelTiTv,
                   accessibleTruthSites, nCallsAtTruth, mode)


def CountCallsAtTruth(data, minLOD):
    return sum(1 for d in data if d.atTruthSite and d.lod >= minLOD)
