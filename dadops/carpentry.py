"""Tools and a contractor that bring boards to the number of nails they need."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Board:
    """A surface with the nails it needs and the nails driven into it."""

    nails_needed: int = 0
    nails_driven: int = 0


class Mallet:
    """A tool that pounds nails in."""

    def drive_nail(self, toolbox, board):
        """Take a nail from the toolbox supply and drive it into ``board``."""
        toolbox.nails -= 1
        board.nails_driven += 1
        print("Mallet: pounded nail into the board.")


class Crowbar:
    """A tool that pulls nails out."""

    def pull_nail(self, toolbox, board):
        """Pull a nail out of ``board`` and put it back into the toolbox supply."""
        board.nails_driven -= 1
        toolbox.nails += 1
        print("Crowbar: yanked nail out of the board.")


@dataclass
class Toolbox:
    """A driver, a puller and a supply of nails."""

    driver: Mallet
    puller: Crowbar
    nails: int = 0


class Contractor:
    """Secures boards using the tools in a toolbox."""

    def fasten(self, toolbox, board):
        """Drive nails until the board has as many as it needs."""
        while board.nails_driven < board.nails_needed:
            toolbox.driver.drive_nail(toolbox, board)

    def unfasten(self, toolbox, board):
        """Pull nails until the board has no more than it needs."""
        while board.nails_driven > board.nails_needed:
            toolbox.puller.pull_nail(toolbox, board)

    def process_boards(self, toolbox, boards):
        """Bring every board, in place, to the number of nails it needs."""
        for number, board in enumerate(boards, start=1):
            print(f"Contractor: examining board #{number}: {board}")
            if board.nails_driven < board.nails_needed:
                self.fasten(toolbox, board)
            elif board.nails_driven > board.nails_needed:
                self.unfasten(toolbox, board)