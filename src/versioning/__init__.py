"""Version selection: choosing one candidate version for a requested version."""
