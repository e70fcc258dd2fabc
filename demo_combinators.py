#!/usr/bin/env python3
"""
Demo: Merge and zip pairs of collections.

Runs the four example scenarios and prints their output.
"""

from pairwise.demo import main


if __name__ == "__main__":
    main()
