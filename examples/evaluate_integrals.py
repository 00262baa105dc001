import numpy as np

from intgen.cases import case_for_switch
from intgen.families import KINETIC, NUCLEAR
from intgen.generator import basis_values, expand_pair


def main():
	# p-p block of the kinetic energy and nuclear attraction integrals
	case = case_for_switch(34)

	print("Generated Fortran assignments:")
	print(expand_pair(NUCLEAR, 1, 2))
	print(expand_pair(KINETIC, 2, 2))

	# Values the consumer would supply for one primitive pair and one nucleus
	values = {"preFactor": 1.0, "coef": 1.0, "eps": 0.25, "a2": 0.8, "Y": 1.6}
	for dim, (pa, pb, pc) in enumerate([(0.1, -0.3, 0.2), (0.0, 0.0, 0.1), (0.2, -0.1, 0.0)], start=1):
		values[f"PA({dim})"] = pa
		values[f"PB({dim})"] = pb
		values[f"PC({dim})"] = pc
	for order in range(11):
		values[f"F{order}"] = 1.0 / (2 * order + 1)

	np.set_printoptions(precision=6, suppress=True)
	print("\nKinetic energy block (s, px, py, pz):")
	print(basis_values(KINETIC, case, values))
	print("\nNuclear attraction block (s, px, py, pz):")
	print(basis_values(NUCLEAR, case, values))


if __name__ == "__main__":
	main()
