from .Data import *


def gale_shapley(pref: dict, cap: dict, rank: dict, print_out = False):
    """
    Gale-Shapley algorithm, applicant-proposing, with synchronous rounds.

    Parameters:
    - pref: dictionary applicant name -> tuple of slot names the applicant may propose to (in order)
        Excluded slots must already be removed. The tuples are not modified.
    - cap: dictionary slot name -> capacity
    - rank: dictionary applicant name -> position in the priority order (lower is better)
        Careful! Must be a strict order (after tie-breaking!)
    - print_out: boolean to control output on the screen

    Returns:
    - A dictionary slot name -> list of tentatively accepted applicant names, sorted by priority
    - The number of proposal rounds that were needed
    """
    # cursor[i] = index of the next slot applicant i will propose to
    cursor = {i: 0 for i in pref}

    # List of free applicants, in priority order so rounds are reproducible
    free_stud = sorted(pref, key=lambda i: rank[i])

    temp_assigned = {j: [] for j in cap}

    n_rounds = 0
    while free_stud:
        # Collect all proposals of this round before any slot decides
        proposals = {}
        for i in free_stud:
            if cursor[i] < len(pref[i]):
                j = pref[i][cursor[i]]
                cursor[i] += 1
                proposals.setdefault(j, []).append(i)
        free_stud = []

        if not proposals:
            break
        n_rounds += 1

        # Now each slot j only keeps the cap[j] applicants with highest priority,
        # the others become free again
        for j, new in proposals.items():
            candidates = sorted(temp_assigned[j] + new, key=lambda i: rank[i])
            temp_assigned[j] = candidates[:cap[j]]
            free_stud.extend(candidates[cap[j]:])

        free_stud.sort(key=lambda i: rank[i])

        if print_out:
            print(f"Round {n_rounds}: {sum(len(p) for p in proposals.values())} proposals, {len(free_stud)} rejected.")

    return temp_assigned, n_rounds
