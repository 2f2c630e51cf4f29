# This file marks the schemas package for request and response models.
# Resource schemas build on the shared envelope fields in `common`.
