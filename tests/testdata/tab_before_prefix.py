#	CodeOwner: @tab-team
