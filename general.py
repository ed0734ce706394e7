def index_cross_product(max_indices):
    """Lazy cross product of all index vectors from [0,...,0] to max_indices.
       Vectors come in odometer order (last index varies fastest) and each one is a new list.
       Negative maxima give nothing, as do None and the empty list."""
    if not max_indices or any(m < 0 for m in max_indices):
        return
    last = len(max_indices) - 1
    current = [0]*len(max_indices)
    while True:
        i = last
        while current[i] > max_indices[i]:
            # carry to the left, like adding 1 to 099
            if i == 0:
                return
            current[i] = 0
            current[i-1] += 1
            i -= 1
        yield list(current)
        current[last] += 1

def cross_product(value_lists):
    "Lazy cross product of a list of value lists, one value from each."
    max_indices = [len(values)-1 for values in value_lists]
    for ixs in index_cross_product(max_indices):
        yield [values[ix] for (values, ix) in zip(value_lists, ixs)]

def cross_product_size(max_indices):
    "Number of vectors index_cross_product(max_indices) yields."
    if not max_indices or any(m < 0 for m in max_indices):
        return 0
    size = 1
    for m in max_indices:
        size *= m+1
    return size
