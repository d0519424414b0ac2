# This file marks the schemas package for API request and response models.
# Keeping the models in one package makes contract changes easy to review.
