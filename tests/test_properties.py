"""
Invariants checked on randomly generated instances.
"""
import pytest

from matchmaker import DataGenParam, generate_data, match_students, match_students_to_multiple_categories

SEEDS = range(15)


def check_capacity_and_exclusion(result, applicants, slots):
    by_name = {a.name: a for a in applicants}
    for s in slots:
        assert len(result.placed[s.name]) <= s.capacity
        for a in result.placed[s.name]:
            assert s.name not in by_name[a.name].excluded


class TestDataGen:

    def test_sizes(self):
        applicants, slots = generate_data(20, 4, seed=1)
        assert len(applicants) == 20
        assert len(slots) == 4
        assert all(s.capacity >= 1 for s in slots)

    def test_reproducible(self):
        first = generate_data(20, 4, seed=3)
        second = generate_data(20, 4, seed=3)
        assert [repr(a) for a in first[0]] == [repr(a) for a in second[0]]
        assert [repr(s) for s in first[1]] == [repr(s) for s in second[1]]

    def test_excluded_not_preferred(self):
        applicants, _ = generate_data(30, 5, DataGenParam(exclude_prob=0.5), seed=2)
        for a in applicants:
            assert not a.excluded & set(a.preferences)

    def test_print_data(self, capsys):
        generate_data(3, 2, print_data=True, seed=1)
        assert "Generated data with 3 applicants and 2 slots." in capsys.readouterr().out


@pytest.mark.parametrize("seed", SEEDS)
class TestInvariants:

    def instance(self, seed):
        return generate_data(40, 6, DataGenParam(capacity_ratio=0.8, mean_pref=3, min_capacity=0), seed=seed)

    def test_single_placement(self, seed):
        applicants, slots = self.instance(seed)
        result = match_students(applicants, slots, seed)

        check_capacity_and_exclusion(result, applicants, slots)

        placed_names = [a.name for s in slots for a in result.placed[s.name]]
        unplaced_names = [a.name for a in result.not_placeable]
        # every applicant in exactly one bucket
        assert sorted(placed_names + unplaced_names) == sorted(a.name for a in applicants)

        assert result.stability_test() is True
        assert result.as_dict() == match_students(applicants, slots, seed).as_dict()

    def test_multi_placement(self, seed):
        applicants, slots = self.instance(seed)
        result = match_students_to_multiple_categories(applicants, slots, seed)

        check_capacity_and_exclusion(result, applicants, slots)

        unplaced_names = {a.name for a in result.not_placeable}
        for a in applicants:
            own = result.slots_of(a)
            assert len(own) == len(set(own))
            assert (len(own) == 0) == (a.name in unplaced_names)
            assert set(own) <= set(a.acceptable())

        assert result.stability_test() is True
        assert result.as_dict() == match_students_to_multiple_categories(applicants, slots, seed).as_dict()
