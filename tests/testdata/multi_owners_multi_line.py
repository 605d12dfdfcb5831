# CodeOwner: @team-frontend
x = 1
# CodeOwner: @team-backend
