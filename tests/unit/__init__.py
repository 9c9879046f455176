"""
Unit tests for PySATL GGD: distribution interfaces, the Generalized Gaussian
family and the shape estimators.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"
