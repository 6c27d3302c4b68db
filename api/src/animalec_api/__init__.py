"""Animalec API service: hosts the startup seeder for the platform collections."""
