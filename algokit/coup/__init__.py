"""Rules engine for the Coup card game: the game, the player and the six roles."""