from enum import Enum

from .errors import IndexOutOfRangeError, InvalidArgumentError
from .utils import clip, get_logger, isint, require_not_none


logger = get_logger(__name__)


class IndexingPolicy(Enum):
    """How :func:`element_at` resolves an index outside of the sequence.

    - `DEFAULT`: the index is used as is, out of range values raise
      :class:`IndexOutOfRangeError`.
    - `CYCLIC`: the index wraps around the sequence length.
    - `CLAMP`: the index saturates to the first or last element.
    """
    DEFAULT = 'default'
    CYCLIC = 'cyclic'
    CLAMP = 'clamp'


def _check_size(size):
    if not isint(size) or size <= 0:
        raise InvalidArgumentError(
            "size", "must be a positive integer, got {}".format(size))


def cyclic_index(index, size):
    """Wrap `index` into `[0, size - 1]`.

    Example:

        >>> cyclic_index(-7, 5)
        3
        >>> cyclic_index(12, 5)
        2
    """
    _check_size(size)
    # equivalent to adding size until non-negative
    return index % size


def clamp_index(index, size):
    """Saturate `index` into `[0, size - 1]`."""
    _check_size(size)
    return clip(index, 0, size - 1)


def element_at(source, index, policy=IndexingPolicy.DEFAULT):
    """Return the item of a sequence at `index` under an indexing policy.

    `source` can be any finite iterable, it is read exactly once.

    Args:
        source (Iterable): The items to pick from.
        index (int): Position of the item, possibly out of range.
        policy (Union[IndexingPolicy, str]): How out of range indices
            are resolved, either a member of :class:`IndexingPolicy` or its
            value (`'default'`, `'cyclic'` or `'clamp'`).

    Raises:
        InvalidArgumentError: `source` is None or empty.
        IndexOutOfRangeError: `index` is out of range under the
            `DEFAULT` policy, negative indices included.

    Example:

        >>> data = [10, 20, 30]
        >>> element_at(data, -1, 'cyclic')
        30
        >>> element_at(data, 99, IndexingPolicy.CLAMP)
        30
        >>> element_at(iter(data), 1)
        20
    """
    require_not_none(source, "source")

    if not isint(index):
        raise TypeError(
            "indices must be integers, not " + index.__class__.__name__)

    policy = IndexingPolicy(policy)

    # single pass over source, it might not support another one
    items = list(source)
    size = len(items)
    logger.debug("materialized %d items", size)

    if size == 0:
        raise InvalidArgumentError("source", "source must not be empty")

    if policy is IndexingPolicy.CYCLIC:
        index = cyclic_index(index, size)
    elif policy is IndexingPolicy.CLAMP:
        index = clamp_index(index, size)
    elif index < 0 or index >= size:
        raise IndexOutOfRangeError(index, size)

    return items[index]
