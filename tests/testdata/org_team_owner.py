# CodeOwner: @myorg/backend-team
