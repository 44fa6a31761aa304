"""Worked reference solutions for the exercise topics."""