from .Assignment import *
from .GaleShapley import gale_shapley

from numpy.random import default_rng
from tqdm import tqdm


def DA_STB(applicants: list, slots: list, rng, multiple = False, fill_random = False, print_out = False):
    """
    Deferred Acceptance with single tie-breaking

    Parameters:
    - applicants: list of Applicant objects
    - slots: list of Slot objects
    - rng: numpy Generator (or a seed) used for the tie-breaking
    - multiple: if True, an applicant can be placed in more than one slot
    - fill_random: if True, applicants that could not be placed are put in a random open slot they did not exclude
    - print_out: boolean to control output on the screen

    Returns:
    - An instance of the MatchResult class
    """
    if multiple:
        return match_students_to_multiple_categories(applicants, slots, rng, fill_random, print_out)
    return match_students(applicants, slots, rng, fill_random, print_out)


def generate_priority_order(applicants: list, rng):
    """
        Draws one random strict order over the applicants (the single tie-break).
        The same order is used by every slot for the whole run.

        Returns a list with the applicant names, highest priority first
    """
    rng = default_rng(rng)
    permut = rng.permutation(len(applicants))
    return [applicants[k].name for k in permut]


def match_students(applicants: list, slots: list, rng, fill_random = False, print_out = False):
    """
    Match applicants to slots, every applicant is placed at most once.

    Raises UnknownSlotReference or DuplicateIdentifier for malformed input.
    """
    slot_by_name = validate_instance(applicants, slots)
    rng = default_rng(rng)

    priority = generate_priority_order(applicants, rng)
    rank = {name: k for k, name in enumerate(priority)}
    stud_by_name = {a.name: a for a in applicants}

    pref = {a.name: a.acceptable() for a in applicants}
    cap = {s.name: s.capacity for s in slots}

    temp_assigned, n_rounds = gale_shapley(pref, cap, rank, print_out)

    placed = {s.name: [stud_by_name[i] for i in temp_assigned[s.name]] for s in slots}
    assigned = {i for j in temp_assigned for i in temp_assigned[j]}
    not_placeable = [stud_by_name[i] for i in priority if i not in assigned]

    if fill_random:
        not_placeable = assign_random(not_placeable, placed, slot_by_name, rng, print_out)

    if print_out:
        print(f"DA_STB finished after {n_rounds} rounds: {len(applicants) - len(not_placeable)} placed, {len(not_placeable)} not placeable.")

    return MatchResult(applicants, slots, placed, not_placeable, priority, multiple=False)


def match_students_to_multiple_categories(applicants: list, slots: list, rng, fill_random = False, print_out = False):
    """
    Match applicants to slots, a single applicant can be placed in more than one slot.

    Deferred acceptance is repeated in passes over the preferences that were not granted yet,
    against the capacity that is left. The priority order is drawn once and used in every pass.

    Raises UnknownSlotReference or DuplicateIdentifier for malformed input.
    """
    slot_by_name = validate_instance(applicants, slots)
    rng = default_rng(rng)

    priority = generate_priority_order(applicants, rng)
    rank = {name: k for k, name in enumerate(priority)}
    stud_by_name = {a.name: a for a in applicants}

    cap_left = {s.name: s.capacity for s in slots}
    granted = {a.name: [] for a in applicants}
    placed = {s.name: [] for s in slots}

    # Every pass places each applicant at most once, so the longest preference list bounds the passes
    max_passes = max([len(a.acceptable()) for a in applicants], default=0)
    pbar = tqdm(total=max_passes, desc='Generate DA_STB passes', unit='pass', disable=not print_out)

    n_pass = 0
    while True:
        pref = {}
        for a in applicants:
            pref[a.name] = tuple(j for j in a.acceptable() if j not in granted[a.name] and cap_left[j] > 0)
        if not any(pref.values()):
            break

        temp_assigned, n_rounds = gale_shapley(pref, cap_left, rank, False)

        n_granted = 0
        for s in slots:
            for i in temp_assigned[s.name]:
                granted[i].append(s.name)
                placed[s.name].append(stud_by_name[i])
                n_granted += 1
            cap_left[s.name] -= len(temp_assigned[s.name])

        n_pass += 1
        pbar.update(1)
        if print_out:
            print(f"Pass {n_pass}: {n_granted} placements in {n_rounds} rounds.")

        if n_granted == 0:
            break
    pbar.close()

    not_placeable = [stud_by_name[i] for i in priority if len(granted[i]) == 0]

    if fill_random:
        not_placeable = assign_random(not_placeable, placed, slot_by_name, rng, print_out)

    return MatchResult(applicants, slots, placed, not_placeable, priority, multiple=True)


def assign_random(not_placeable: list, placed: dict, slot_by_name: dict, rng, print_out = False):
    """
    Give every applicant in 'not_placeable' (visited in the given order) a random slot
    that still has room and that the applicant did not exclude.
    'placed' is updated in place.

    Returns the applicants for which no such slot existed
    """
    still_not_placeable = []
    for a in not_placeable:
        open_slots = [j for j in placed if len(placed[j]) < slot_by_name[j].capacity and j not in a.excluded]
        if len(open_slots) > 0:
            j = open_slots[rng.integers(len(open_slots))]
            placed[j].append(a)
            if print_out:
                print(f"Applicant {a.name} randomly assigned to {j}.")
        else:
            still_not_placeable.append(a)
    return still_not_placeable
