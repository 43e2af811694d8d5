"""Component tests for the SGF diagram tools.

1. Board - Stones, groups, liberties and captures (core/board.py)
2. Moves - Move replay and overwritten labels (core/moves.py)
3. Labels - Move number labels and captions (core/labels.py)
4. SGF Parser - SGF reading (input/sgf_parser.py)
"""
