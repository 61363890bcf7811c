"""
====================================================
Tranche: one score cutoff and its summary statistics
====================================================

Author: Shujia Huang
Date  : 2014-05-23 11:21:53
"""
from .. import utils
from ..log import logger
from .variant_recalibrator_argument_collection import Mode

CURRENT_VERSION = 5
TRANCHES_HEADER = ('targetTruthSensitivity,numKnown,numNovel,knownTiTv,'
                   'novelTiTv,minVQSLod,filterName,model,accessibleTruthSites,'
                   'callsAtTruthSites,truthSensitivity')


class Tranche(object):

    def __init__(self, threshold, minLod, numKnown, knownTiTv, numNovel,
                 novelTiTv, accessibleTruthSites, callsAtTruth, mode,
                 name='anonymous'):

        if threshold < 0.0 or threshold > 100.0:
            raise ValueError('[ERROR] Target tranche value is unreasonable: '
                             '%s' % threshold)

        if numKnown < 0 or numNovel < 0:
            raise ValueError('[ERROR] Invalid tranche - no. variants is < 0 : '
                             'known %d novel %d' % (numKnown, numNovel))

        self.threshold            = threshold
        self.minLod               = minLod
        self.numKnown             = numKnown
        self.knownTiTv            = knownTiTv
        self.numNovel             = numNovel
        self.novelTiTv            = novelTiTv
        self.accessibleTruthSites = accessibleTruthSites
        self.callsAtTruth         = callsAtTruth
        self.mode                 = mode
        self.name                 = name

    def GetTruthSensitivity(self):
        if self.accessibleTruthSites > 0:
            return self.callsAtTruth / float(self.accessibleTruthSites)

        return 0.0

    def __str__(self):
        return ('Tranche threshold=%.2f minLod=%.4f known=(%d @ %.4f) '
                'novel=(%d @ %.4f) truthSites(%d accessible, %d called), '
                'name=%s, mode=%s' % (self.threshold, self.minLod,
                                      self.numKnown, self.knownTiTv,
                                      self.numNovel, self.novelTiTv,
                                      self.accessibleTruthSites,
                                      self.callsAtTruth, self.name,
                                      self.mode))

    __repr__ = __str__


def TranchesString(tranches):
    """
    Format the tranches as the text of a tranches file. Each tranche gets
    a filter name covering (previous threshold, this threshold].
    """
    lines = ['# Variant quality score tranches file',
             '# Version number %d' % CURRENT_VERSION,
             TRANCHES_HEADER]

    prev = None
    for t in sorted(tranches, key=lambda t: t.threshold):
        lines.append('%.2f,%d,%d,%.4f,%.4f,%.4f,VQSRTranche%s%.2fto%.2f,%s,'
                     '%d,%d,%.4f' % (t.threshold, t.numKnown, t.numNovel,
                                     t.knownTiTv, t.novelTiTv, t.minLod,
                                     t.mode, prev.threshold if prev else 0.0,
                                     t.threshold, t.mode,
                                     t.accessibleTruthSites, t.callsAtTruth,
                                     t.GetTruthSensitivity()))
        prev = t

    return '\n'.join(lines) + '\n'


def WriteTranchesFile(tranches, fileName):

    try:
        O = utils.Open(fileName, 'w')
    except IOError as e:
        raise IOError('[ERROR] Could not create output file %s: %s' %
                      (fileName, e))

    with O:
        O.write(TranchesString(tranches))

    logger.info('Wrote %d tranches to %s' % (len(tranches), fileName))
    return fileName


def ReadTranches(fileName):
    """
    Read a tranches file written by WriteTranchesFile and return the
    tranches sorted ascending by threshold.
    """
    header, tranches = None, []
    with utils.Open(fileName, 'r') as I:
        for line in I:
            line = line.strip()
            if not line or line.startswith('#'):
                continue

            col = line.split(',')
            if header is None:
                header = col
                missing = [k for k in TRANCHES_HEADER.split(',')
                           if k not in header]
                if missing:
                    raise ValueError('[ERROR] Malformed tranches file %s, '
                                     'missing columns: %s' %
                                     (fileName, ', '.join(missing)))
                continue

            if len(col) != len(header):
                raise ValueError('[ERROR] Malformed tranches file %s, expected'
                                 ' %d columns but found %d: %s' %
                                 (fileName, len(header), len(col), line))

            vals = dict(zip(header, col))
            try:
                mode = Mode(vals['model'])
            except ValueError:
                raise ValueError('[ERROR] Unknown variant mode "%s" in '
                                 'tranches file %s' % (vals['model'], fileName))

            tranches.append(Tranche(float(vals['targetTruthSensitivity']),
                                    float(vals['minVQSLod']),
                                    int(vals['numKnown']),
                                    float(vals['knownTiTv']),
                                    int(vals['numNovel']),
                                    float(vals['novelTiTv']),
                                    int(vals['accessibleTruthSites']),
                                    int(vals['callsAtTruthSites']),
                                    mode,
                                    name=vals['filterName']))

    if header is None:
        raise ValueError('[ERROR] No tranches header found in %s' % fileName)

    tranches.sort(key=lambda t: t.threshold)
    return tranches
