# Deployment and maintenance scripts
