#!/usr/bin/env python3
"""
Demo: Export the example scenarios as YAML and the people as JSON.
"""

from pairwise.demo import export_main


if __name__ == "__main__":
    export_main()
