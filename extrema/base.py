# base.py
#
# Minimum and maximum of any iterable in a single pass

from collections import namedtuple

_missing = object()


class MinMax(namedtuple('MinMax', ['min', 'max'])):
    '''
    The minimum and maximum elements of a collection. Unpacks and compares like
    a plain (min, max) tuple.

    Example:
        >>> lo, hi = MinMax(1, 5)
        >>> MinMax(1, 5) == (1, 5)
        True
    '''
    __slots__ = ()


def extrema(iterable, key=None):
    '''
    Finds the minimum and maximum elements of an iterable in a single pass. Collections
    with fewer than 2 elements have no range, so they have no extrema either (even a single
    element is not reported as its own min and max).

    The iterable is traversed exactly once. Generators and other iterators are left
    exhausted; use :func:`extrema_view` to guarantee the input is left untouched. The
    returned elements are the objects yielded by the traversal, not copies. When several
    elements tie for the minimum (or maximum), any one of them may be returned.

    Args:
        iterable (iterable): elements with a total order (or a key that provides one)
        key (callable, optional): function of one argument used to compare elements, as in
            the builtin min() and max(). Called once per element.

    Returns:
        MinMax or None: (min, max) of the elements, or None if there are fewer than 2

    Example:
        >>> extrema([3, 1, 2])
        MinMax(min=1, max=3)
        >>> extrema(['bb', 'a', 'ccc'], key=len)
        MinMax(min='a', max='ccc')
        >>> extrema([7]) is None
        True
    '''
    it = iter(iterable)
    first = next(it, _missing)
    second = next(it, _missing)
    if first is _missing or second is _missing:
        return None

    if key is None:
        return _scan(first, second, it)
    return _scan_keyed(first, second, it, key)


def _scan(first, second, it):
    lo, hi = first, second
    if lo > hi:
        lo, hi = hi, lo

    # lo <= hi always holds, so a single element never moves both bounds
    for x in it:
        if x < lo:
            lo = x
        elif x > hi:
            hi = x

    return MinMax(lo, hi)


def _scan_keyed(first, second, it, key):
    lo, hi = first, second
    lo_key, hi_key = key(first), key(second)
    if lo_key > hi_key:
        lo, hi = hi, lo
        lo_key, hi_key = hi_key, lo_key

    for x in it:
        k = key(x)
        if k < lo_key:
            lo, lo_key = x, k
        elif k > hi_key:
            hi, hi_key = x, k

    return MinMax(lo, hi)


def extrema_view(collection, key=None):
    '''
    Borrowing version of :func:`extrema`. The collection must be re-iterable (list, tuple,
    set, dict, range, ndarray, ...) and is still intact afterwards. The returned min and max
    are the same objects stored in the collection.

    Args:
        collection (iterable): re-iterable collection of elements with a total order
        key (callable, optional): function of one argument used to compare elements

    Raises:
        TypeError: if collection is a single-pass iterator, which would be consumed. This is
            about the kind of argument passed, never about the data; any finite collection of
            ordered elements gives a result.

    Returns:
        MinMax or None: (min, max) of the collection, or None if it has fewer than 2 elements
    '''
    it = iter(collection)
    if it is collection:
        raise TypeError(f"Cannot borrow from a single-pass {type(collection).__name__}, use extrema() to consume it")
    return extrema(it, key=key)


class ExtremaMixin:
    '''
    Adds an extrema() method to a collection class. The collection is borrowed, not consumed.

    Example:
        >>> class Samples(ExtremaMixin, list):
        ...     pass
        >>> Samples([4, 2, 9]).extrema()
        MinMax(min=2, max=9)
    '''

    def extrema(self, key=None):
        return extrema_view(self, key=key)
