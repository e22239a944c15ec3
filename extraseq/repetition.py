from .utils import get_logger, known_size, require_non_negative, \
    require_not_none


logger = get_logger(__name__)

# upper bound on the slots reserved before the source is read
MAX_PRESIZE = 1024


def _replay(source, count):
    if count == 0:
        return

    size = known_size(source)
    buffer = [] if size is None else [None] * min(size, MAX_PRESIZE)
    n = 0

    for item in source:
        yield item

        if n < len(buffer):
            buffer[n] = item
        else:
            buffer.append(item)
        n += 1

    # unused slots when source yielded less than it announced
    del buffer[n:]

    if n == 0:
        return

    logger.debug("replaying %d buffered items %d more times", n, count - 1)

    for _ in range(count - 1):
        for item in buffer:
            yield item


def repeat(source, count):
    """Repeat the items of a sequence `count` times.

    `source` is iterated at most once, whatever the value of `count`: the
    first pass forwards items as they are read and keeps a copy, further
    passes replay the copies. It must therefore be finite.

    Arguments are checked immediately, but nothing is read from `source`
    until the result is iterated. The result is a one-shot iterator, call
    `repeat` again for a fresh one.

    Args:
        source (Iterable): The items to repeat.
        count (int): Number of passes, zero yields nothing.

    Raises:
        InvalidArgumentError: `source` is None or `count` is negative.

    Example:

        >>> list(repeat([1, 2], 3))
        [1, 2, 1, 2, 1, 2]
        >>> doubled = (x * 2 for x in [1, 2])
        >>> list(repeat(doubled, 2))
        [2, 4, 2, 4]
    """
    require_not_none(source, "source")
    require_non_negative(count, "count")

    return _replay(source, count)
