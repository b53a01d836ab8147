#!/usr/bin/env python3
"""Entry point for the crate-stack puzzle solver."""

from supplystacks.cli import main


if __name__ == "__main__":
    main()
