"""FitTrack — training-plan generation, gamification and nutrition targets."""
