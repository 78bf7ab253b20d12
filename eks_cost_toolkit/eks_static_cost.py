#!/usr/bin/env python3
"""
EKS Static Cost Script
Estimates the static monthly cost of an EKS cluster from its running resources.

This module is a thin wrapper around the estimate package.
All functionality lives in eks_cost_toolkit/estimate/.
"""

from eks_cost_toolkit.estimate.cli import main

if __name__ == "__main__":  # pragma: no cover - script entry point
    raise SystemExit(main())
