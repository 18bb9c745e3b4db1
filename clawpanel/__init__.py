"""Control panel backend for a locally running OpenClaw gateway."""
