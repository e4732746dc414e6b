from backend.engine.gamegenerator.generator import (
    GameGenerator,
    difficulty_level,
    generate_answer,
    generate_seed,
)

__all__ = ["GameGenerator", "difficulty_level", "generate_answer", "generate_seed"]
