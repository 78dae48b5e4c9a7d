"""Keyboard-driven terminal screens and the application loop for projman."""