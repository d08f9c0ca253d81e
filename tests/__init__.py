"""
Test suite for the pagequill project.

Unit tests for the pipe, the frame protocol, the layouts and the page driver.
"""
