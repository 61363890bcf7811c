"""Test finding tranches
"""
import os

import numpy as np
import pytest

from vqtranche.vqsr.variant_datum import VariantDatum
from vqtranche.vqsr.variant_recalibrator_argument_collection import Mode
from vqtranche.vqsr.selection_metric import (NovelTiTvMetric,
                                             TruthSensitivityMetric)
from vqtranche.vqsr import tranche_manager as tm


def _truth_data():
    return [VariantDatum(lod=1.0, atTruthSite=True),
            VariantDatum(lod=2.0, atTruthSite=False),
            VariantDatum(lod=3.0, atTruthSite=True),
            VariantDatum(lod=4.0, atTruthSite=False)]


def _random_data(n=2000, seed=7):
    rs = np.random.RandomState(seed)
    lods = rs.normal(0.0, 3.0, n)
    return [VariantDatum(lod=float(lod),
                         isKnown=bool(rs.rand() < 0.6),
                         isSNP=bool(rs.rand() < 0.9),
                         isTransition=bool(rs.rand() < 0.5 + 0.05 * np.tanh(lod)),
                         atTruthSite=bool(rs.rand() < 0.3 + 0.1 * np.tanh(lod)))
            for lod in lods]


def _summary(tranches):
    return [(t.threshold, t.minLod, t.numKnown, t.numNovel, t.knownTiTv,
             t.novelTiTv, t.accessibleTruthSites, t.callsAtTruth)
            for t in tranches]


def test_sort_by_lod():
    data = _truth_data()[::-1]
    assert [d.lod for d in tm.SortByLod(data)] == [1.0, 2.0, 3.0, 4.0]
    assert tm.SortByLod(data) == _truth_data()
    assert tm.SortByLod([]) == []


def test_truth_sensitivity_tranche():
    data = _truth_data()
    tranches = tm.FindTranches([data[2], data[0], data[3], data[1]], [50.0],
                               TruthSensitivityMetric(2), Mode.SNP)

    assert len(tranches) == 1
    t = tranches[0]
    assert t.threshold == 50.0
    assert t.minLod == 2.0
    assert t.callsAtTruth == 1
    assert t.accessibleTruthSites == 2
    assert t.numKnown == 0
    assert t.numNovel == 3
    assert t.novelTiTv == 0.0
    assert t.knownTiTv == 0.0
    assert t.mode is Mode.SNP


def test_exact_equality_reaches_threshold():
    tranches = tm.FindTranches(_truth_data(), [0.0],
                               TruthSensitivityMetric(2), Mode.INDEL)

    assert len(tranches) == 1
    assert tranches[0].minLod == 4.0
    assert tranches[0].callsAtTruth == 0
    assert tranches[0].mode is Mode.INDEL


def test_first_threshold_unattainable_is_fatal():
    data = [VariantDatum(lod=1.0, atTruthSite=False),
            VariantDatum(lod=2.0, atTruthSite=False),
            VariantDatum(lod=3.0, atTruthSite=False),
            VariantDatum(lod=4.0, atTruthSite=True)]

    with pytest.raises(ValueError) as excinfo:
        tm.FindTranches(data, [0.0, 50.0], TruthSensitivityMetric(100),
                        Mode.SNP)

    assert 'TruthSensitivity' in str(excinfo.value)
    assert '1.00' in str(excinfo.value)


def test_first_titv_threshold_unattainable_is_fatal():
    data = [VariantDatum(lod=float(i), isTransition=False) for i in range(4)]

    with pytest.raises(ValueError) as excinfo:
        tm.FindTranches(data, [0.0], NovelTiTvMetric(10.0), Mode.SNP)

    assert 'NovelTiTv' in str(excinfo.value)
    assert '10.00' in str(excinfo.value)


def test_later_threshold_unattainable_truncates():
    data = [VariantDatum(lod=1.0, atTruthSite=True),
            VariantDatum(lod=2.0, atTruthSite=False),
            VariantDatum(lod=3.0, atTruthSite=False),
            VariantDatum(lod=4.0, atTruthSite=True)]

    tranches = tm.FindTranches(data, [50.0, 0.0, 90.0],
                               TruthSensitivityMetric(2), Mode.SNP)

    assert len(tranches) == 1
    assert tranches[0].threshold == 50.0
    assert tranches[0].minLod == 2.0


def test_novel_titv_tranches():
    data = [VariantDatum(lod=1.0, isTransition=False),
            VariantDatum(lod=2.0, isTransition=True),
            VariantDatum(lod=3.0, isKnown=True, isTransition=True),
            VariantDatum(lod=4.0, isTransition=True),
            VariantDatum(lod=5.0, isTransition=False)]

    tranches = tm.FindTranches(data, [0.0, 50.0, 100.0], NovelTiTvMetric(2.0),
                               Mode.SNP)
    assert [t.minLod for t in tranches] == [2.0, 2.0, 1.0]

    t = tranches[0]
    assert (t.numKnown, t.numNovel) == (1, 3)
    assert t.knownTiTv == 1.0
    assert t.novelTiTv == 2.0

    t = tranches[2]
    assert (t.numKnown, t.numNovel) == (1, 4)
    assert t.novelTiTv == 1.0


def test_tranche_of_variants_counts_ties_below_min_index():
    data = [VariantDatum(lod=1.0, atTruthSite=True),
            VariantDatum(lod=2.0, atTruthSite=True, isTransition=True),
            VariantDatum(lod=2.0, isKnown=True, isTransition=True),
            VariantDatum(lod=3.0, isSNP=False, atTruthSite=True)]

    t = tm.TrancheOfVariants(data, 2, 90.0, Mode.SNP)

    assert t.minLod == 2.0
    assert t.numKnown == 1
    assert t.numNovel == 2
    assert t.knownTiTv == 1.0
    assert t.novelTiTv == 1.0
    assert t.accessibleTruthSites == 3
    assert t.callsAtTruth == 2


def test_count_calls_at_truth():
    data = _truth_data()
    assert tm.CountCallsAtTruth(data, float('-inf')) == 2
    assert tm.CountCallsAtTruth(data, 2.0) == 1
    assert tm.CountCallsAtTruth(data, 3.0) == 1
    assert tm.CountCallsAtTruth(data, 3.5) == 0
    assert tm.CountCallsAtTruth([], 0.0) == 0


def test_count_calls_at_truth_is_non_increasing():
    data = _random_data()
    counts = [tm.CountCallsAtTruth(data, x) for x in np.linspace(-12, 12, 49)]
    assert all(a >= b for a, b in zip(counts, counts[1:]))


def test_min_lod_is_non_increasing_for_ascending_thresholds():
    data = _random_data()
    nTrueSites = tm.CountCallsAtTruth(data, float('-inf'))
    thresholds = [10.0, 50.0, 90.0, 99.0, 99.9, 100.0]

    tranches = tm.FindTranches(data, thresholds,
                               TruthSensitivityMetric(nTrueSites), Mode.SNP)

    assert [t.threshold for t in tranches] == thresholds
    minLods = [t.minLod for t in tranches]
    assert all(a >= b for a, b in zip(minLods, minLods[1:]))
    assert tranches[-1].callsAtTruth == nTrueSites


def test_titv_min_lod_is_non_increasing_for_ascending_fdr():
    data = _random_data(seed=11)
    thresholds = [0.0, 1.0, 5.0, 10.0, 50.0, 100.0]

    tranches = tm.FindTranches(data, thresholds, NovelTiTvMetric(0.6),
                               Mode.SNP)

    minLods = [t.minLod for t in tranches]
    assert len(minLods) >= 1
    assert all(a >= b for a, b in zip(minLods, minLods[1:]))


def test_results_do_not_depend_on_input_order():
    data = _random_data(n=500, seed=3)
    nTrueSites = tm.CountCallsAtTruth(data, float('-inf'))
    thresholds = [90.0, 99.0, 100.0]

    expected = _summary(tm.FindTranches(
        list(data), thresholds, TruthSensitivityMetric(nTrueSites), Mode.SNP))

    shuffled = list(data)
    np.random.RandomState(5).shuffle(shuffled)
    for d in (data[::-1], shuffled):
        found = tm.FindTranches(d, thresholds,
                                TruthSensitivityMetric(nTrueSites), Mode.SNP)
        assert _summary(found) == expected


def test_debug_file(tmpdir):
    debugFile = str(tmpdir.join('tranches.debug.txt'))
    tm.FindTranches(_truth_data()[::-1], [50.0], TruthSensitivityMetric(2),
                    Mode.SNP, debugFile=debugFile)

    with open(debugFile) as I:
        lines = I.read().splitlines()

    assert lines == ['Qual metricValue runningValue',
                     '1.0000 1 0.0000',
                     '2.0000 0 0.5000',
                     '3.0000 1 0.5000',
                     '4.0000 0 1.0000']


def test_debug_file_can_not_be_created(tmpdir):
    debugFile = os.path.join(str(tmpdir), 'no_such_dir', 'debug.txt')

    with pytest.raises(IOError) as excinfo:
        tm.FindTranches(_truth_data(), [50.0], TruthSensitivityMetric(2),
                        Mode.SNP, debugFile=debugFile)

    assert debugFile in str(excinfo.value)
