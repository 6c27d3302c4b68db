#!/usr/bin/env python3
"""
Seed the Animalec collections from the JSON snapshots in seed_data/:
  - animalec.animals.json, animalec.users.json, animalec.user_levels.json
  - animalec.experts.json, animalec.sponsors.json
  - animalec.questions.json, animalec.quizzes.json

This is a thin entrypoint that delegates to the seeding CLI implementation.
"""
from __future__ import annotations

from animalec_api.seeding.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
