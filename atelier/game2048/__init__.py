"""The 2048 sliding-tile game for the terminal."""