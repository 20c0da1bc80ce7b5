"""
Application Layer

Contains the playback session and the ports it depends on.
This layer orchestrates domain objects and infrastructure to fulfill use cases.

Structure:
- services/: The playback session state machine and its result types
- interfaces/: Port interfaces for the audio engine and state observers
"""
