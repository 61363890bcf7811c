"""
==============================================
One scored variant call for tranche selection
==============================================

Author : Shujia Huang
Date   : 2014-05-20 17:49:27
"""


class VariantDatum(object):

    def __init__ (self, lod=None, isKnown=False, isSNP=True,
                  isTransition=False, atTruthSite=False):
        self.lod          = lod          # log-odds score, the only ranking key
        self.isKnown      = isKnown      # present in the known-variant catalog
        self.isSNP        = isSNP
        self.isTransition = isTransition # Only meaningful when isSNP is True
        self.atTruthSite  = atTruthSite

    def __eq__(self, other):
        if not isinstance(other, VariantDatum):
            return NotImplemented

        return (self.lod, self.isKnown, self.isSNP, self.isTransition,
                self.atTruthSite) == (other.lod, other.isKnown, other.isSNP,
                                      other.isTransition, other.atTruthSite)

    __hash__ = None

    def __repr__(self):
        return ('VariantDatum(lod=%r, isKnown=%r, isSNP=%r, isTransition=%r, '
                'atTruthSite=%r)' % (self.lod, self.isKnown, self.isSNP,
                                     self.isTransition, self.atTruthSite))
