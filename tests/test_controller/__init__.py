"""
Controller Tests

Tests for dispatching:
- Car call and hall call validation
- Lowest cost allocation strategy
"""
