"""Guess input processing.

Raw text from the player flows through a small parse -> validate pipeline before
it becomes a BoundedValue; the reader re-prompts on the first stage that fails.
"""
