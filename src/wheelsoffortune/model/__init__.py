"""
The MODEL layer contains pure data structures and state-transition logic.
It has NO knowledge of the GUI (Qt) or of how things are drawn.
It deals with Wheels, Particles, Connectors and the Undo History.
"""
