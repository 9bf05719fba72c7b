"""Unit tests mirroring the dragonball package; every exchange goes through a FakeTransport."""
