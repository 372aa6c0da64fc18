"""DSA Mentor: conceptual problem assistance backed by a local Ollama model."""
