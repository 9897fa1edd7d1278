'''
Geometric predicates used by the triangulation.

The predicates are pluggable: anything that offers ``orient2d`` and
``incircle`` with the signatures below can be handed to a Triangulation.
'''

# classification of a point relative to a circumcircle
INSIDE = -1
ON = 0
OUTSIDE = 1


def orient2d(pa, pb, pc):
    """Direction from pa to pc, via pb, where returned value is as follows:

    left:     + [ = ccw ]
    straight: 0.
    right:    - [ = cw ]

    returns twice signed area under triangle pa, pb, pc
    """
    detleft = (pa[0] - pc[0]) * (pb[1] - pc[1])
    detright = (pa[1] - pc[1]) * (pb[0] - pc[0])
    det = detleft - detright
    return det


def incircle(pa, pb, pc, pd):
    """Tests whether pd is in circle defined by the 3 points pa, pb and pc

    Positive when pd lies inside the circle and pa, pb, pc are ccw.
    """
    adx = pa[0] - pd[0]
    bdx = pb[0] - pd[0]
    cdx = pc[0] - pd[0]
    ady = pa[1] - pd[1]
    bdy = pb[1] - pd[1]
    cdy = pc[1] - pd[1]
    bdxcdy = bdx * cdy
    cdxbdy = cdx * bdy
    alift = adx * adx + ady * ady
    cdxady = cdx * ady
    adxcdy = adx * cdy
    blift = bdx * bdx + bdy * bdy
    adxbdy = adx * bdy
    bdxady = bdx * ady
    clift = cdx * cdx + cdy * cdy
    det = alift * (bdxcdy - cdxbdy) + \
        blift * (cdxady - adxcdy) + \
        clift * (adxbdy - bdxady)
    return det


def sign(value):
    """-1, 0 or +1 depending on the sign of value"""
    if value > 0:
        return 1
    elif value < 0:
        return -1
    return 0


class FloatPredicates(object):
    """Plain floating point predicates.

    Fast, but not robust: near-degenerate (collinear / cocircular) input
    can give inconsistent answers.
    """
    __slots__ = ()

    def orient2d(self, pa, pb, pc):
        return orient2d(pa, pb, pc)

    def incircle(self, pa, pb, pc, pd):
        return incircle(pa, pb, pc, pd)

    def __repr__(self):
        return "FloatPredicates()"


class RobustPredicates(object):
    """Adaptive precision predicates of Shewchuk, via the geompreds package.

    Slower than the floating point ones, but consistent for near-degenerate
    input.
    """
    __slots__ = ('_orient2d', '_incircle')

    def __init__(self):
        from geompreds import orient2d as _orient2d, incircle as _incircle
        self._orient2d = _orient2d
        self._incircle = _incircle

    def orient2d(self, pa, pb, pc):
        return self._orient2d((pa[0], pa[1]), (pb[0], pb[1]), (pc[0], pc[1]))

    def incircle(self, pa, pb, pc, pd):
        return self._incircle((pa[0], pa[1]), (pb[0], pb[1]),
                              (pc[0], pc[1]), (pd[0], pd[1]))

    def __repr__(self):
        return "RobustPredicates()"


FLOAT = FloatPredicates()
