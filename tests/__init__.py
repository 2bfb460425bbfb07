#!/usr/bin/env python3
"""
Test suite for the job assistant.

All tests run without network access; model calls go through
tests.mocks.llm_mocks.MockLLMProvider.

    # Run all tests
    python -m pytest tests/ -v

    # Using unittest
    python -m unittest discover tests -v
"""
