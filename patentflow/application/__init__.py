"""Application layer: ports, DTOs and async services orchestrating storage."""
