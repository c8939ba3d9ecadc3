"""Menu commands for the interactive console."""
