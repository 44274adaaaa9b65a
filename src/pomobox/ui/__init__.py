"""User interface: snapshot text layout, NiceGUI screen and dev keypad."""
