# This file marks the routers package for the service route modules.
# Health routes are shared; each resource service mounts exactly one resource router.
