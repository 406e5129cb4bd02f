##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other SurrealORM
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to SurrealORM.
##############################################################################

"""
This module stores constants representing file paths that will be needed for
SurrealORM's configuration.
"""

import os


CONFIG_FILENAME: str = "surrealorm.yaml"
USER_HOME: str = os.path.expanduser("~")
SURREALORM_HOME: str = os.path.join(USER_HOME, ".surrealorm")
