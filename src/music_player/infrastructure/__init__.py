"""
Infrastructure Layer

Concrete adapters behind the application ports:
- audio/: AudioEngine implementations
- console/: TickObserver that renders state as log lines
- scheduling/: the periodic ticker driving the session
"""
