# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later

# Input event stages
# backend level:
# stage 0: backend-specific; poll native events from the windowing library
# stage 1: convert each native event into zero, one, or two canonical input events

# host level:
# stage 2: dispatch canonical events to the GUI core in the order they were produced
