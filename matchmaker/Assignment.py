from .Data import *

import numpy as np
import pandas as pd


class MatchResult:
    """
    Class MatchResult:
    The outcome of one matching run.

    Attributes:
    - placed (dict): slot name -> list of accepted applicants (in priority order). Every slot has a key.
    - not_placeable (list): applicants that could not be placed (in priority order).
        In multi-placement mode these are the applicants without any placement.
    - priority (list): applicant names in the tie-break order used for the run (highest priority first).
    - multiple (bool): True if each applicant could be placed in more than one slot.

    Functions:
    1. slots_of(): the slots an applicant ended up in
    2. as_dict(): plain names-only version of the result
    3. statistics(): average rank of the placements
    4. compute_n_placed(): number of applicants with at least one placement
    5. to_frame(): one row per placement, as a pandas DataFrame
    6. find_blocking_pairs() / stability_test(): check the result is stable
    """

    def __init__(self, applicants: list, slots: list, placed: dict, not_placeable: list, priority: list, multiple = False):
        self.applicants = list(applicants)
        self.slots = list(slots)
        self.placed = placed
        self.not_placeable = not_placeable
        self.priority = list(priority)
        self.multiple = multiple

    def slots_of(self, applicant) -> list:
        name = applicant.name if isinstance(applicant, Applicant) else applicant
        return [j for j in self.placed if any(a.name == name for a in self.placed[j])]

    def as_dict(self) -> dict:
        return {
            "placed": {j: [a.name for a in self.placed[j]] for j in self.placed},
            "not_placeable": [a.name for a in self.not_placeable],
        }

    def compute_n_placed(self, print_out = False):
        n_placed = len({a.name for j in self.placed for a in self.placed[j]})

        if print_out:
            print(f"Number of placed applicants: {n_placed} out of {len(self.applicants)}.")

        return n_placed

    def statistics(self, print_out = False):
        # Average rank (1 = first choice) over all placements
        ranks = [a.rank_of(j) for j in self.placed for a in self.placed[j]]
        # Random fill-up can place applicants in slots they did not rank
        ranks = [r for r in ranks if r is not None]
        if len(ranks) == 0:
            avg_rank = np.nan
        else:
            avg_rank = float(np.mean(ranks))

        if print_out:
            print(f"\nAverage rank: {avg_rank}.\n")

        return avg_rank

    def to_frame(self) -> pd.DataFrame:
        position = {name: k for k, name in enumerate(self.priority)}
        rows = []
        for s in self.slots:
            for a in self.placed.get(s.name, []):
                rows.append({
                    'slot': s.name,
                    'applicant': a.name,
                    'rank': a.rank_of(s),
                    'priority': position[a.name],
                })
        return pd.DataFrame(rows, columns=['slot', 'applicant', 'rank', 'priority'])

    def find_blocking_pairs(self) -> list:
        """
        Returns the pairs (applicant name, slot name) that block the result.

        Single placement: applicant a and acceptable slot s ranked above a's own slot (or a is unplaced),
        while s has free capacity or holds an applicant with lower priority than a.
        Multi placement: applicant a is not in acceptable slot s although s has free capacity.
        """
        position = {name: k for k, name in enumerate(self.priority)}
        cap = {s.name: s.capacity for s in self.slots}
        unstable_pairs = []

        for a in self.applicants:
            own = self.slots_of(a)
            for j in a.acceptable():
                if j in own:
                    if not self.multiple:
                        # Only slots ranked above the own slot can block
                        break
                    continue
                if len(self.placed[j]) < cap[j]:
                    unstable_pairs.append((a.name, j))
                elif not self.multiple:
                    if any(position[b.name] > position[a.name] for b in self.placed[j]):
                        unstable_pairs.append((a.name, j))
        return unstable_pairs

    def stability_test(self, print_out = False):
        """
        Tests whether the result contains no blocking pairs
        """
        unstable_pairs = self.find_blocking_pairs()

        if print_out:
            if len(unstable_pairs) != 0:
                for (i, j) in unstable_pairs:
                    print(f"Unstable pair: Applicant {i} and Slot {j}.")
                print(f"The matching is NOT stable!")
            else:
                print(f"The matching is stable!")

        return len(unstable_pairs) == 0

    # Choose what is being shown for the command 'print(result)'
    def __str__(self):
        s = "Students matched to categories:\n\n"
        for j in self.placed:
            s += f"{j}:\n"
            for a in self.placed[j]:
                s += f" - {a.name}\n"

        if len(self.not_placeable) == 0:
            s += "\nAll students could be placed.\n"
        else:
            s += "\nNot placeable:\n"
            for a in self.not_placeable:
                s += f" - {a.name}\n"
        return s
