import copy
import itertools
import pickle
from concurrent.futures import ThreadPoolExecutor
from enum import Enum

import pytest

from task_priority import Priority, PriorityError, UnknownPriorityLabel


URGENCY_ORDER = [
    Priority.USER_INTERACTIVE,
    Priority.USER_INITIATED,
    Priority.UTILITY,
    Priority.BACKGROUND,
    Priority.UNKNOWN,
]


class OtherPriority(Enum):
    UTILITY = 2


class TestOrdering:

    def test_urgency_chain(self):
        assert Priority.USER_INTERACTIVE > Priority.USER_INITIATED > Priority.UTILITY > Priority.BACKGROUND

    def test_unknown_is_lowest(self):
        assert Priority.UNKNOWN < Priority.BACKGROUND
        assert min(Priority) is Priority.UNKNOWN

    @pytest.mark.parametrize("more, less", list(itertools.combinations(URGENCY_ORDER, 2)))
    def test_every_pair_follows_ranking(self, more, less):
        assert more > less
        assert more >= less
        assert less < more
        assert less <= more
        assert not more < less
        assert not more <= less

    def test_at_least_as_urgent(self):
        assert Priority.USER_INITIATED >= Priority.UTILITY
        assert Priority.UTILITY >= Priority.UTILITY
        assert not Priority.BACKGROUND >= Priority.UTILITY

    def test_sort_key(self):
        shuffled = [Priority.UTILITY, Priority.UNKNOWN, Priority.USER_INTERACTIVE, Priority.BACKGROUND, Priority.USER_INITIATED]
        assert sorted(shuffled, reverse=True) == URGENCY_ORDER

    def test_ordering_against_other_types_is_unsupported(self):
        with pytest.raises(TypeError):
            Priority.UTILITY < 2
        with pytest.raises(TypeError):
            Priority.UTILITY >= "Utility"


class TestEquality:

    def test_same_member(self):
        assert Priority.UTILITY == Priority.UTILITY

    def test_distinct_members(self):
        assert Priority.UTILITY != Priority.BACKGROUND
        assert Priority.UNKNOWN != Priority.BACKGROUND

    @pytest.mark.parametrize("a, b, c", list(itertools.product(Priority, repeat=3)))
    def test_equivalence_relation(self, a, b, c):
        assert a == a
        assert (a == b) == (b == a)
        if a == b and b == c:
            assert a == c

    def test_never_equal_to_encodings(self):
        assert Priority.UTILITY != 2
        assert Priority.UTILITY != "Utility"
        assert Priority.UTILITY != OtherPriority.UTILITY

    @pytest.mark.parametrize("priority", list(Priority))
    def test_copies_are_equal(self, priority):
        assert copy.copy(priority) == priority
        assert copy.deepcopy(priority) is priority
        assert pickle.loads(pickle.dumps(priority)) is priority


class TestHashing:

    @pytest.mark.parametrize("a, b", list(itertools.product(Priority, repeat=2)))
    def test_hash_consistent_with_equality(self, a, b):
        if a == b:
            assert hash(a) == hash(b)

    def test_dict_key(self):
        workers = {Priority.USER_INITIATED: "foreground", Priority.BACKGROUND: "idle"}
        assert workers[Priority.unit_test()] == "foreground"
        assert Priority.UTILITY not in workers

    def test_set_members(self):
        assert len(set(Priority) | set(Priority.core())) == 5


class TestConstants:

    def test_highest_async(self):
        assert Priority.highest_async() is Priority.USER_INITIATED
        assert Priority.highest_async() < Priority.USER_INTERACTIVE

    def test_highest_async_is_stable(self):
        with ThreadPoolExecutor(max_workers=8) as executor:
            results = list(executor.map(lambda _: Priority.highest_async(), range(64)))
        assert set(results) == {Priority.USER_INITIATED}

    def test_unit_test(self):
        assert Priority.unit_test() is Priority.USER_INITIATED
        assert Priority.unit_test() == Priority.unit_test()


class TestRendering:

    @pytest.mark.parametrize("priority, label", [
        (Priority.USER_INTERACTIVE, "UserInteractive"),
        (Priority.USER_INITIATED, "UserInitiated"),
        (Priority.UTILITY, "Utility"),
        (Priority.BACKGROUND, "Background"),
        (Priority.UNKNOWN, "Unknown"),
    ])
    def test_label(self, priority, label):
        assert priority.label == label
        assert str(priority) == label
        assert f"{priority}" == label

    def test_labels_are_distinct(self):
        labels = [priority.label for priority in Priority]
        assert len(set(labels)) == len(labels)

    def test_core_excludes_unknown(self):
        assert Priority.core() == tuple(URGENCY_ORDER[:4])
        assert all(priority.is_known for priority in Priority.core())
        assert not Priority.UNKNOWN.is_known


class TestFromLabel:

    @pytest.mark.parametrize("priority", list(Priority))
    def test_name_and_label(self, priority):
        assert Priority.from_label(priority.name) is priority
        assert Priority.from_label(priority.label) is priority
        assert Priority.from_label(priority.label.upper()) is priority

    @pytest.mark.parametrize("text", ["user_initiated", "user-initiated", " User Initiated ", "USERINITIATED"])
    def test_lenient_spellings(self, text):
        assert Priority.from_label(text) is Priority.USER_INITIATED

    @pytest.mark.parametrize("text", ["none", "Unset", "undetermined", "unknown"])
    def test_unknown_spellings(self, text):
        assert Priority.from_label(text) is Priority.UNKNOWN

    def test_priority_passes_through(self):
        assert Priority.from_label(Priority.BACKGROUND) is Priority.BACKGROUND

    @pytest.mark.parametrize("value", ["urgent", "", "user", 2, None])
    def test_rejects_unknown_labels(self, value):
        with pytest.raises(UnknownPriorityLabel) as excinfo:
            Priority.from_label(value)
        assert excinfo.value.label == value

    def test_error_hierarchy(self):
        with pytest.raises(PriorityError):
            Priority.from_label("urgent")
        with pytest.raises(ValueError):
            Priority.from_label("urgent")
