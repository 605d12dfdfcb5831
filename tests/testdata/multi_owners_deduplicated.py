# CodeOwner: @team-a @team-a
x = 1
# CodeOwner: @team-a
