"""Answers to questions, plus question and answer votes."""
