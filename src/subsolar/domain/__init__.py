# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Pure computational core: ephemeris, twilight classification, overlay geometry."""
