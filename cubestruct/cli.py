#!/usr/bin/env python3
# ========================================
# Copyright 2021 22nd Solutions, LLC
# Copyright 2024 Martin TOUZOT
#
# Permission is hereby granted, free of charge, to any person obtaining
# a copy of this software and associated documentation files (the "Software"),
# to deal in the Software without restriction, including without limitation
# the rights to use, copy, modify, merge, publish, distribute, sublicense,
# and/or sell copies of the Software, and to permit persons to whom the
# Software is furnished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included
# in all copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND,
# EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES
# OF MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT.
# IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM,
# DAMAGES OR OTHER LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR
# OTHERWISE, ARISING FROM, OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE
# USE OR OTHER DEALINGS IN THE SOFTWARE.
#
# ========================================
"""
Command line interface to turn a virtual cube and inspect its forms.

Usage :
    cubestruct-cli
    python -m cubestruct.cli

Documented commands (type help <topic>):
========================================
check   debug_level  history  load  print_cube  random  scramble
coords  facelets     inverse  move  quit        reset   undo
"""
import cmd
import logging
import random
from typing import List, Optional

from .coord_cube import CoordCube
from .cubie import CORNERS, EDGES
from .cubie_cube import CubieCube
from .errors import CubeError
from .facelet_cube import FaceletCube
from .moves import Moves

logger = logging.getLogger("cubestruct_cli")

DEFAULT_SCRAMBLE_LENGTH = 20


# ------------------------------------------------
# Main Command line interface for cubestruct
# ------------------------------------------------
class CubeCli(cmd.Cmd):
    """Define the command line interface over a virtual cube."""

    prompt = "cube> "

    def __init__(self, rng: Optional[random.Random] = None, **kwargs) -> None:
        """
        Initialize a CLI with a solved cube.

        :param rng: source of randomness for scramble and random
        :type rng: random.Random, optional
        """
        cmd.Cmd.__init__(self, **kwargs)
        self.rng = rng or random.Random()
        self.cube = CubieCube.SOLVED
        self.history = Moves()

    # ----------------------------------------------------
    # Helper functions for the CLI
    # ----------------------------------------------------
    def set_cube(self, cube: CubieCube) -> None:
        """
        Replace the cube and forget the move history.

        :param cube: the new cube
        :type cube: CubieCube
        """
        self.cube = cube
        self.history.clear()

    def emptyline(self) -> bool:
        # do not repeat the last command
        return False

    # ----------------------------------------------------
    # CLI commands
    # ----------------------------------------------------
    def do_reset(self, args) -> None:
        """Go back to a solved cube."""
        logger.info("Resetting the cube")
        self.set_cube(CubieCube.SOLVED)

    def do_move(self, args) -> None:
        """
        Apply moves to the cube.

        Usage:
            move [U|L|F|R|B|D]['|2] ...

        Example:
            move R U R' U'
        """
        try:
            moves = Moves(args)
        except CubeError as err:
            print(f"Error - {err}")
            return
        self.cube = self.cube.apply_moves(moves)
        for move in moves:
            self.history.add(move)
        print(f"Moves: {moves}")

    def do_undo(self, args) -> None:
        """Undo the last move."""
        if len(self.history) == 0:
            print("Nothing to undo")
            return
        move = self.history.move_list.pop()
        self.cube = self.cube.apply_move(move.inverse)
        print(f"Undid {move}")

    def do_scramble(self, args) -> None:
        """
        Scramble the cube with random moves.

        Usage:
            scramble     # 20 moves
            scramble 30  # 30 moves
        """
        try:
            num_moves = int(args) if args.strip() else DEFAULT_SCRAMBLE_LENGTH
        except ValueError:
            print("Error - pick a positive number of moves")
            return
        if num_moves < 0:
            print("Error - pick a positive number of moves")
            return
        moves = Moves()
        moves.randomize(num_moves, self.rng)
        self.do_move(str(moves))

    def do_random(self, args) -> None:
        """Replace the cube with a random possible cube."""
        self.set_cube(CubieCube.random_possible(self.rng))
        print(self.cube.to_facelet_cube())

    def do_inverse(self, args) -> None:
        """Replace the cube with its inverse."""
        self.set_cube(self.cube.inverse())

    def do_print_cube(self, args) -> None:
        """Print the current state of the cube."""
        print(self.cube.to_facelet_cube().to_net(ansi=True))

    def do_facelets(self, args) -> None:
        """Print the facelet string of the cube, faces in URFDLB order."""
        print(self.cube.to_facelet_cube().to_string())

    def do_load(self, args) -> None:
        """
        Load a cube from its facelet string.

        Usage:
            load UUUUUUUUURRRRRRRRRFFFFFFFFFDDDDDDDDDLLLLLLLLLBBBBBBBBB
        """
        try:
            cube = FaceletCube.from_string(args).to_cubie_cube()
        except CubeError as err:
            print(f"Error - {err}")
            return
        self.set_cube(cube)
        if not cube.is_possible_state():
            print("Warning - this cube cannot be solved")

    def do_coords(self, args) -> None:
        """Print the coordinates of the cube."""
        coords = CoordCube.from_cubie_cube(self.cube)
        print(f"Corner orientation: {coords.corner_ori}")
        print(f"Edge orientation:   {coords.edge_ori}")
        print(f"UD-slice:           {coords.udslice}")

    def do_check(self, args) -> None:
        """Check if the cube is solved and can be solved."""
        status = f"Solved: {self.cube.is_solved()}, "
        status += f"possible: {self.cube.is_possible_state()}, "
        status += f"corner twist {int(self.cube.cubies(CORNERS).total_orientation())}, "
        status += f"edge flip {int(self.cube.cubies(EDGES).total_orientation())}, "
        status += f"parity {self.cube.corner_parity()}/{self.cube.edge_parity()}"
        print(status)

    def do_history(self, args) -> None:
        """Print the moves applied since the last reset."""
        if len(self.history) > 0:
            print(f"History: {self.history}")
        else:
            print("History is empty")

    def complete_debug_level(self, text, line, begidx, endidx) -> List[str]:
        """List all debug level, possibly starting with `text`."""
        levels = ["info", "warning", "error"]
        if not text:
            return levels
        return [f for f in levels if f.startswith(text)]

    def do_debug_level(self, args) -> None:
        """
        Set the level of debug info to provide across all the components.

        Usage:
            debug_level [info | warning | error ]
        """
        modules = [
            "moves",
            "cubie_cube",
            "coord_cube",
            "facelet_cube",
            "cubestruct_cli",
        ]

        level = None
        if "info" in args:
            level = logging.INFO
        elif "warning" in args:
            level = logging.WARNING
        elif "error" in args:
            level = logging.ERROR

        if level:
            for name in modules:
                logging.getLogger(name).setLevel(level)

    def do_quit(self, args) -> bool:
        """Exit the command line interface.

        :returns: True once exit
        :rtype: bool
        """
        return True

    def help_quit(self) -> None:
        """Log help to quit the current CLI."""
        print("syntax: quit")


def main() -> None:
    """Start the command line interface and run the CLI loop."""
    logging.basicConfig()
    print("Starting cubestruct command line interface (CLI)")

    # Allocate the CLI
    cli = CubeCli()

    # Run the CLI loop
    cli.cmdloop()


if __name__ == "__main__":
    main()
