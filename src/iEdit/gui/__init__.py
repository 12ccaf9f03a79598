"""Qt desktop shell for iEdit."""
