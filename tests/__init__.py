# Tests for IonSim Lasers
#
# Test organization mirrors source structure:
#   - test_lasers.py: Laser construction, mutation, equality, summary
#   - test_utils/: Tests for vector helpers
#
# Running tests:
#   pytest tests/
#   pytest tests/test_lasers.py -v
#   pytest tests/ -k "pointing"
