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
"""Patterns explorer.

The script picks a cube pattern, prints its stickers and coordinates, then
checks that the reverse sequence brings the cube back to the solved state.

Usage:
    python3 patterns.py [pattern name]
"""
import random
import sys

from cubestruct import CoordCube, CubieCube, Moves

PATTERNS = {
    "checkerboard": "R2 L2 U2 D2 F2 B2",
    "sixspots": "U D' R L' F B' U D'",
    "cubeincube": "F L F U' R U F2 L2 U' L' B D' B' L2 U",
    "superflip": "U R2 F B R B2 R U2 L B2 R U' D' R2 F R' L B2 U2 F2",
}

# ------------------------------------------------------
# Pick the pattern
# ------------------------------------------------------
if len(sys.argv) > 1 and sys.argv[1] in PATTERNS:
    choice = sys.argv[1]
else:
    choice = random.choice(list(PATTERNS))

pattern_moves = Moves(PATTERNS[choice])
print(f"Pattern for {choice}: {pattern_moves}")

# Builds the pattern from the solved cube
cube = CubieCube.SOLVED.apply_moves(pattern_moves)
print(cube.to_facelet_cube().to_net(ansi=True))
print(f"Facelets: {cube.to_facelet_cube().to_string()}")

# The coordinates can follow the same moves through the move tables
coords = CoordCube.SOLVED.apply_moves(pattern_moves)
print(f"Coordinates: {coords}")
if coords != CoordCube.from_cubie_cube(cube):
    print("Coordinates do not match the cube")

# --------------------------------------------------------------
# Get back to solved state
# --------------------------------------------------------------
reverse_moves = pattern_moves.reverse()
print(f"Reverse pattern: {reverse_moves}")
if cube.apply_moves(reverse_moves).is_solved():
    print("You are back to the solved state!")
