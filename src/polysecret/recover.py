"""Point selection and end-to-end secret recovery.

Selection is fixed: sort the usable points by ascending x and take the
first k. Whether the chosen points actually lie on one degree-(k-1)
polynomial is not checked; an inconsistent set usually surfaces as a
NonIntegerResult.
"""

import logging
from dataclasses import dataclass

from polysecret.errors import InsufficientPoints
from polysecret.lagrange import lagrange_at_zero
from polysecret.samples import Document, decode_samples

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PointSet:
    points: tuple
    k: int
    declared_n: int = None

    @classmethod
    def from_document(cls, doc: Document) -> 'PointSet':
        points = tuple(decode_samples(doc.samples))
        return cls(points=points, k=doc.k, declared_n=doc.n)

    @property
    def available(self) -> int:
        return len(self.points)

    def select(self) -> list:
        return select_points(self.points, self.k)

    def recover(self) -> int:
        if self.declared_n is not None and self.declared_n != self.available:
            logger.warning("Declared n=%d but %d usable points found",
                           self.declared_n, self.available)
        return recover_secret(self.points, self.k)


def select_points(points, k: int) -> list:
    """Return the k points with the smallest x, in ascending x order."""
    if len(points) < k:
        raise InsufficientPoints(len(points), k)
    chosen = sorted(points, key=lambda p: p[0])[:k]
    logger.debug("Selected x values: %s", [p[0] for p in chosen])
    return chosen


def recover_secret(points, k: int) -> int:
    """Interpolate the first k points (by x) at zero; must be an integer."""
    chosen = select_points(points, k)
    value = lagrange_at_zero(chosen)
    secret = value.to_int()
    logger.info("Recovered secret from %d of %d points", k, len(points))
    return secret


def recover_from_document(doc: Document) -> int:
    return PointSet.from_document(doc).recover()
