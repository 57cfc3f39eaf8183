"""Domain event vocabulary for patentflow."""
