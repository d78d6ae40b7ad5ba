"""Multi-agent patterns: a supervisor over experts, a two-agent swarm and the token research swarm."""
