from pathlib import Path

from hr_browser.core.sample_data import generate_sample_frame

n_employees = 1470

df = generate_sample_frame(n=n_employees, seed=123)

Path("data").mkdir(exist_ok=True)
df.to_csv("data/hr_employees.csv", index=False)
print("wrote data/hr_employees.csv", df.shape)
