##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other SurrealORM
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to SurrealORM.
##############################################################################

"""
The `common` package provides shared definitions used across SurrealORM.

Modules:
    enums.py: Defines the connection mode and connection state enumerations.
"""
