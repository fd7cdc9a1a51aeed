"""
termsnake - single-player snake game for the terminal.

  domain    - coordinates, board, snake and game state.
  players   - keyboard reader thread and the random autopilot.
  services  - frame rendering and raw terminal mode.
  config    - SNAKE_* settings.
  main      - tick loop and entry point.
"""
