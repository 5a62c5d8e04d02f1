'''
    A lazy Fibonacci heap without decrease-key.

    The heap is a forest of heap-ordered trees. Insert and merge only
    splice nodes into the list of roots; all linking of trees is deferred
    to extract_min, which consolidates the roots so that no two trees
    have the same degree. Since nodes are never cut from their parents,
    every tree is a binomial tree, and after an extract_min the number of
    roots equals the number of one bits in the heap size.

    Items only need to support "<" (a strict weak ordering). Equality and
    hashing are never used.

    The structure is not thread safe. A caller sharing a heap between
    threads must hold one lock per heap, and merge requires exclusive
    access to both heaps involved.
'''


import math
import random


class Heap:
    '''Lazy Fibonacci heap - A pointer based mergeable min-heap.

    The class supports the following operations:

      - Heap() creates and returns an empty heap.
      - len(H) returns the number of items in the heap H.
      - H.empty() returns if the heap H is empty.
      - H.find_min() returns the minimum item in H, or None if H is empty.
      - H.insert(item) inserts item into H.
      - H.extract_min() removes and returns the minimum item in H, or
        returns None if H is empty.
      - H1.merge(H2) moves all items of H2 into H1, leaves H2 empty, and
        returns H1.

    The operations FindMin, Insert and Merge take worst-case O(1) time,
    and ExtractMin amortized O(log n) time.

    The roots of the forest are the children of a sentinel node. The first
    root always holds the minimum item.
    '''

    def __init__(self):
        '''Initialize a new empty heap.'''

        self._forest = Node()  # sentinel, its children are the roots
        self._size = 0

    def __len__(self):
        '''Return the number of items in the heap.'''

        return self._size

    def empty(self):
        '''Return if heap is empty.'''

        return self._size == 0

    def find_min(self):
        '''Return the item with smallest key, None if heap is empty.'''

        minimum = self._forest._first
        if minimum is None:
            return None
        return minimum._item

    def insert(self, item):
        '''Insert item into heap.'''

        assert item is not None

        node = Node(item)
        forest = self._forest
        if forest._first is None or node < forest._first:
            forest.insert_at_front(node)
        else:
            forest.append_child(node)
        self._size += 1

    def extract_min(self):
        '''Remove and return the item with smallest key (None if empty).'''

        forest = self._forest
        minimum = forest._first
        if minimum is None:
            return None

        # Children of the minimum become roots
        forest.remove_child(minimum)
        forest.append_children(minimum)

        # At most one root per degree
        forest.restructure_children()

        # Restore minimum as first root
        new_minimum = forest.find_min_child()
        if new_minimum is not None:
            forest.remove_child(new_minimum)
            forest.insert_at_front(new_minimum)

        self._size -= 1
        return minimum._item

    def merge(self, other):
        '''Move all items from other heap into this heap. Returns this heap.

        The roots of other are appended to the roots of this heap without
        any linking. Other is left as an empty heap.
        '''

        assert other is not self, 'cannot merge a heap with itself'

        other_minimum = other._forest._first
        forest = self._forest
        forest.append_children(other._forest)
        self._size += other._size
        minimum = forest._first
        if (other_minimum is not None and
                other_minimum is not minimum and
                other_minimum < minimum):
            forest.remove_child(other_minimum)
            forest.insert_at_front(other_minimum)
        other._forest = Node()
        other._size = 0

        return self

    def root_count(self):
        '''Return the number of trees in the forest.'''

        return self._forest._degree

    ##################################################################
    #                      Validation methods
    ##################################################################

    def validate(self):
        '''Validate all heap structure and invariants.'''

        def validate_children(parent):
            '''Validate the sibling list of parent. Return its length.'''

            count = 0
            previous = None
            for child in parent.children():
                assert child._prev is previous
                previous = child
                count += 1
            assert parent._last is previous
            if parent._first is None:
                assert parent._last is None
            assert parent._degree == count  # degree = number of children
            return count

        def validate_tree(node, parent=None):
            '''Recursive validate tree nodes. Return size of tree.'''

            # Validate heap order
            if parent is not None:
                assert not node < parent
            validate_children(node)
            size = 1
            for child in node.children():
                size += validate_tree(child, node)
            # Only trees of equal degree are linked, i.e. binomial trees
            assert size == 2 ** node._degree
            return size

        heap = self
        forest = heap._forest
        assert forest._item is None
        assert forest._prev is None and forest._next is None
        roots = validate_children(forest)
        if heap._size == 0:
            assert roots == 0
            assert forest._first is None
        else:
            assert roots > 0
            minimum = forest._first
            size = 0
            degrees = set()
            for root in forest.children():
                # Min-pointer invariant
                assert not root < minimum
                size += validate_tree(root)
                assert root.height() == root._degree + 1
                degrees.add(root._degree)
            assert size == heap._size
            assert max(degrees) <= math.log2(size)


######################################################################
#                           Node records
######################################################################


class Node:
    '''A tree node storing one item.

    Siblings are doubly linked by _prev and _next, terminated by None at
    both ends. The children of a node are accessed by _first and _last,
    and _degree is the number of children. There are no parent pointers.
    '''

    def __init__(self, item=None):
        '''Create a node without siblings and children.'''

        self._item = item
        # siblings
        self._prev = None
        self._next = None
        # children
        self._first = None
        self._last = None
        self._degree = 0

    def __lt__(self, other):
        '''Compare nodes by their items.'''

        return self._item < other._item

    def item(self):
        '''Return the item stored in node.'''

        return self._item

    def degree(self):
        '''Return the number of children of node.'''

        return self._degree

    def attached(self):
        '''Return if node has sibling links.'''

        return self._prev is not None or self._next is not None

    def children(self):
        '''Generator to return all children of node.'''

        child = self._first
        while child is not None:
            yield child
            child = child._next

    def all_nodes(self):
        '''Generator to yield all nodes in subtree rooted at node.'''

        yield self
        for child in self.children():
            yield from child.all_nodes()

    def height(self):
        '''Return height of subtree rooted at node.'''

        return 1 + max((child.height() for child in self.children()), default=0)

    #######################################################
    # Child list primitives

    def append_children(self, other):
        '''Move all children of other to the end of the children of node.'''

        if other._first is None:
            return
        if self._last is None:
            self._first = other._first
            self._last = other._last
        else:
            self._last._next = other._first
            other._first._prev = self._last
            self._last = other._last
        self._degree += other._degree
        other._first = None
        other._last = None
        other._degree = 0

    def remove_child(self, child):
        '''Remove child from the children of node.'''

        assert child._prev is not None or self._first is child, \
            'node to remove is not a child of this node'
        assert child._next is not None or self._last is child, \
            'node to remove is not a child of this node'

        if child._prev is None:
            self._first = child._next
        else:
            child._prev._next = child._next
        if child._next is None:
            self._last = child._prev
        else:
            child._next._prev = child._prev
        self._degree -= 1
        child._prev = None
        child._next = None

    def append_child(self, child):
        '''Add a detached node as the last child of node.'''

        assert not child.attached(), 'node is already a child'
        assert self._first is not child, 'node is already a child'

        if self._last is None:
            self._first = child
            self._last = child
        else:
            child._prev = self._last
            self._last._next = child
            self._last = child
        self._degree += 1

    def insert_at_front(self, child):
        '''Add a detached node as the first child of node.'''

        assert not child.attached(), 'node is already a child'
        assert self._first is not child, 'node is already a child'

        if self._first is None:
            self._first = child
            self._last = child
        else:
            child._next = self._first
            self._first._prev = child
            self._first = child
        self._degree += 1

    def find_min_child(self):
        '''Return the child with the smallest item, None if no children.'''

        return min(self.children(), default=None)  # uses Node.__lt__

    #######################################################
    # Consolidation

    def combine(self, x, y):
        '''Link two children x and y of equal degree. Return the winner.

        The child with the smaller item becomes the parent of the other.
        On ties x wins.
        '''

        assert x is not y
        assert x._degree == y._degree

        if y < x:
            x, y = y, x
        self.remove_child(y)
        x.append_child(y)
        return x

    def restructure_children(self):
        '''Link children of equal degree until all degrees are distinct.'''

        index = DegreeIndex()
        child = self._first
        while child is not None:
            tree = child
            child = child._next
            while True:
                other = index.get(tree._degree)
                if other is None:
                    break
                index.put(tree._degree, None)
                tree = self.combine(tree, other)  # carry
            index.put(tree._degree, tree)


######################################################################
#                         Degree index
######################################################################


class DegreeIndex:
    '''Growable table from a degree to at most one node of that degree.'''

    MINIMUM_CAPACITY = 32

    def __init__(self):
        '''Create an empty table without any slots.'''

        self._slots = []

    def __len__(self):
        '''Return the number of allocated slots.'''

        return len(self._slots)

    def get(self, i):
        '''Return the node stored at degree i, None if there is none.'''

        if i >= len(self._slots):
            return None
        return self._slots[i]

    def put(self, i, node):
        '''Store node at degree i, growing the table if required.'''

        slots = self._slots
        if i >= len(slots):
            if node is None:
                return
            capacity = max(i + 1, DegreeIndex.MINIMUM_CAPACITY)
            slots.extend([None] * (capacity - len(slots)))
        slots[i] = node


######################################################################
#                          Test methods
######################################################################


def swap(L, i, j):
    '''Swap entries L[i] and L[j].'''

    L[i], L[j] = L[j], L[i]


def pop_random(L):
    '''Remove a random element from L (by swapping with last element).'''

    swap(L, -1, random.randint(0, len(L) - 1))
    return L.pop()


def random_items(n, distinct=False):
    '''Returns a list of n random integer items.'''

    if distinct:
        return random.sample(range(1, 3 * n), n)
    else:
        return [random.randint(1, n) for _ in range(n)]


def delete_all(heap):
    '''Create sorted list with all items from heap by n x extract_min.'''

    sorted_sequence = []
    while not heap.empty():
        item = heap.find_min()
        heap.validate()
        assert heap.extract_min() is item
        sorted_sequence.append(item)
        heap.validate()
    assert heap.find_min() is None
    assert heap.extract_min() is None
    heap.validate()
    return sorted_sequence


def test_sorting_insert(n):
    '''Sort using n x insert and n x extract_min.'''

    items = random_items(n)
    heap = Heap()
    heap.validate()
    for item in items:
        heap.insert(item)
        heap.validate()
    assert len(heap) == n
    assert delete_all(heap) == sorted(items)


def test_sorting_merge(n):
    '''Sort using (n - 1) x merge in random order and n x extract_min.'''

    items = random_items(n)
    heaps = []
    # Create n heaps with one item
    for item in items:
        heap = Heap()
        heap.insert(item)
        heap.validate()
        heaps.append(heap)
    # Repeatedly merge two random heaps until one heap remains
    while len(heaps) >= 2:
        heap1 = pop_random(heaps)
        heap2 = pop_random(heaps)
        heap = heap1.merge(heap2)
        heap.validate()
        heap2.validate()
        assert heap2.empty()
        heaps.append(heap)
    heap = heaps.pop()
    assert delete_all(heap) == sorted(items)


def test_sorting_mixed(n):
    '''Sort while extracting half of the items between the inserts.'''

    items = random_items(n)
    heap = Heap()
    extracted = []
    for i, item in enumerate(items):
        heap.insert(item)
        heap.validate()
        if i % 2 == 1:
            extracted.append(heap.extract_min())
            heap.validate()
    remaining = delete_all(heap)
    assert sorted(extracted + remaining) == sorted(items)
    assert remaining == sorted(remaining)


def test_sorting(n, repeats):
    '''Run all sorting tests repeats times for a given n.'''

    print('Sorting n =', n, end=' ', flush=True)
    for _ in range(1, repeats + 1):
        print('.', end='', flush=True)
        test_sorting_insert(n)
        test_sorting_merge(n)
        test_sorting_mixed(n)
    print()


def test_random_operations(n):
    '''Test a random sequence of n heap operations.'''

    print(n, 'random heap operations ', end='', flush=True)
    heaps = []
    for iteration in range(1, n + 1):
        if iteration % 100 == 0:
            print('.', end='', flush=True)
        p = random.random()
        if len(heaps) == 0 or p < 0.05:  # new heap
            heap = Heap()
            heaps.append((heap, []))
            heap.validate()
        elif p < 0.1:  # merge
            if len(heaps) >= 2:
                heap1, S1 = pop_random(heaps)
                heap2, S2 = pop_random(heaps)
                heap = heap1.merge(heap2)
                heaps.append((heap, S1 + S2))
                heap.validate()
                heap2.validate()
        elif p < 0.6:  # insert
            heap, S = random.choice(heaps)
            item = random.randint(1, 100)
            heap.insert(item)
            S.append(item)
            heap.validate()
        else:  # extract_min
            heap, S = random.choice(heaps)
            if heap.empty():
                assert heap.extract_min() is None
            else:
                item = heap.extract_min()
                assert item == min(S)
                S.remove(item)
                heap.validate()
                assert heap.root_count() <= math.log2(len(heap) + 1)
        # Validate content of the heaps
        for heap, S in heaps:
            assert len(heap) == len(S)
            if heap.empty():
                assert heap.find_min() is None
            else:
                assert heap.find_min() == min(S)
                nodes = [node for root in heap._forest.children()
                         for node in root.all_nodes()]
                assert sorted(S) == sorted(node.item() for node in nodes)
    print(' final heap sizes:', *sorted(len(heap) for heap, S in heaps))


######################################################################
#                               Main
######################################################################


if __name__ == '__main__':
    test_sorting(1, 10)
    test_sorting(10, 100)
    test_sorting(100, 10)
    test_sorting(1000, 2)
    test_random_operations(10000)
