"""
The MODEL layer contains pure data structures.
It has NO knowledge of the renderer (matplotlib) or the layout algorithm.
It deals with Geometry and the time-slot records.
"""
