"""
Simulator Tests

Tests for the elevator entity:
- Request ordering and direction-ordered queues
- State machine transitions and door cycle timing
- Interrupt handling and real-time environment
"""
