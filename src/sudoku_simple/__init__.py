"""
Console Sudoku package.

Components:
- board: fixed puzzle, working grid, placement rules and rendering
- game: turn loop (GameRunner) with per-turn records and metrics
- move_validator/console/stopwatch: input parsing, terminal I/O, session timer
- config: settings.yml / environment loading
"""
# Package exports are intentionally minimal; import modules directly as needed.
