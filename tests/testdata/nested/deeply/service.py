# CodeOwner: @platform-team
