"""Unit tests for keep-list parsing and candidate selection."""

import pytest

from profilesweep.core.selection import parse_keep_list, plan_deletion, is_confirmed
from profilesweep.models.profile import ProfileRecord


def make_record(sid: str, loaded: bool = False) -> ProfileRecord:
    return ProfileRecord(
        sid=sid,
        username=sid.lower(),
        health_status=0,
        roaming_configured=False,
        status=0,
        loaded=loaded,
        size=None if loaded else 100,
    )


@pytest.fixture
def inventory() -> list[ProfileRecord]:
    return [make_record("S-1-5-21-A"), make_record("S-1-5-21-B"), make_record("S-1-5-21-C")]


class TestParseKeepList:
    """Test keep-list tolerance."""

    def test_simple(self):
        assert parse_keep_list("0,5,7,17") == {0, 5, 7, 17}

    def test_malformed_token_ignored(self):
        assert parse_keep_list("0, abc, 2") == {0, 2}

    def test_leading_plus_kept(self):
        assert parse_keep_list("0,+1") == {0, 1}

    def test_double_plus_ignored(self):
        assert parse_keep_list("++1,2") == {2}

    def test_negative_ignored(self):
        assert parse_keep_list("-1,3") == {3}

    def test_whitespace_and_newline(self):
        assert parse_keep_list(" 1 ,\t2 \n") == {1, 2}

    def test_duplicates(self):
        assert parse_keep_list("4,4,4") == {4}

    @pytest.mark.parametrize("text", ["", None, ",,,", "none", "1.5"])
    def test_nothing_kept(self, text):
        assert parse_keep_list(text) == set()


class TestPlanDeletion:
    """Test candidate computation."""

    def test_keep_first_and_last(self, inventory):
        plan = plan_deletion(inventory, {0, 2})
        assert plan.sids == {"S-1-5-21-B"}
        assert plan.protected == []

    def test_loaded_profile_protected(self, inventory):
        inventory[1] = make_record("S-1-5-21-B", loaded=True)
        plan = plan_deletion(inventory, {0, 2})
        assert plan.sids == set()
        assert [r.sid for r in plan.protected] == ["S-1-5-21-B"]

    def test_kept_loaded_profile_not_reported(self, inventory):
        inventory[1] = make_record("S-1-5-21-B", loaded=True)
        plan = plan_deletion(inventory, {1})
        assert plan.protected == []
        assert plan.sids == {"S-1-5-21-A", "S-1-5-21-C"}

    def test_candidates_are_unkept_and_unloaded(self, inventory):
        inventory[2] = make_record("S-1-5-21-C", loaded=True)
        keep = {1}
        plan = plan_deletion(inventory, keep)
        expected = {r.sid for i, r in enumerate(inventory) if i not in keep and not r.loaded}
        assert plan.sids == expected
        assert all(not r.loaded for r in plan.candidates)

    def test_candidates_in_inventory_order(self, inventory):
        plan = plan_deletion(inventory, set())
        assert [r.sid for r in plan.candidates] == ["S-1-5-21-A", "S-1-5-21-B", "S-1-5-21-C"]

    def test_out_of_range_keep_ignored(self, inventory):
        plan = plan_deletion(inventory, {1, 99})
        assert plan.sids == {"S-1-5-21-A", "S-1-5-21-C"}

    def test_keep_everything(self, inventory):
        assert plan_deletion(inventory, {0, 1, 2}).is_empty

    def test_duplicate_sid_listed_once(self):
        records = [make_record("S-1-5-21-A"), make_record("S-1-5-21-A")]
        plan = plan_deletion(records, set())
        assert len(plan.candidates) == 1

    def test_idempotent(self, inventory):
        inventory[0] = make_record("S-1-5-21-A", loaded=True)
        first = plan_deletion(inventory, {2})
        second = plan_deletion(inventory, {2})
        assert first == second

    def test_plus_prefixed_index_not_deleted(self, inventory):
        plan = plan_deletion(inventory, parse_keep_list("0,+1"))
        assert plan.sids == {"S-1-5-21-C"}

    def test_keep_parsed_from_input(self, inventory):
        plan = plan_deletion(inventory, parse_keep_list("0, abc, 2"))
        assert plan.sids == {"S-1-5-21-B"}


class TestIsConfirmed:
    """Test confirmation token matching."""

    @pytest.mark.parametrize("answer", ["y", "Y", " y\n", "Y\r\n"])
    def test_affirmative(self, answer):
        assert is_confirmed(answer) is True

    @pytest.mark.parametrize("answer", ["", "n", "N", "yes", "yy", "ja", None])
    def test_anything_else_aborts(self, answer):
        assert is_confirmed(answer) is False

    def test_custom_token(self):
        assert is_confirmed("DELETE", token="delete") is True
        assert is_confirmed("y", token="delete") is False
