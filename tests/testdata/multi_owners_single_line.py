# CodeOwner: @team-a @team-b @person-c
x = 1
