#!/usr/bin/env python3
"""
Demo: the same client code driving two different visitors.

Usage:
    python demo_visitor.py [CONFIG]
    python demo_visitor.py --help
"""

from ddvisit.demo import main


if __name__ == "__main__":
    main()
