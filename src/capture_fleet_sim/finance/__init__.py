"""Financial metrics: NPV, IRR, levelized cost, breakeven, sensitivity."""
