"""
The VIEW layer draws placed bubbles. It reads layout results and the
selected label; it never feeds anything back into the engine.
"""
