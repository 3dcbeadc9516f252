# Propcontainer Test Suite
# Copyright 2024 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0
