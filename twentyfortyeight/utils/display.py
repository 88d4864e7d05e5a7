"""Text rendering of a 2048 game state."""

from twentyfortyeight.core.gamestate import GameState


def render_board(state: GameState) -> str:
    """
    Render the score and the board as text.

    Parameters
    ----------
    state : GameState
        The game state to render.

    Returns
    -------
    str
        A score line, a blank line, then one line per row. Each cell is right-aligned on four
        characters (blank when empty) and followed by a space.
    """
    lines = [f'Score: {state.score}', '']
    for row in state.grid.tolist():
        lines.append(''.join(f'{tile:4} ' if tile else '     ' for tile in row))
    return '\n'.join(lines)
