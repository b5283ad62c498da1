def run_robot(state, robot, memory=None, verbose=False):
    """
    Let ``robot`` drive until every parcel is delivered.

    :param state: Initial VillageState
    :param robot: Callable (state, memory) -> Action
    :param memory: Robot memory for the first turn
    :param verbose: Print each move and the final turn count
    :return: Number of turns taken
    """
    turn = 0
    while state.parcels:
        action = robot(state, memory)
        state = state.move(action.direction)
        memory = action.memory
        turn += 1
        if verbose:
            print(f"Moved to {action.direction}")
    if verbose:
        print(f"Done in {turn} turns")
    return turn
