import networkx as nx

from gf2tools.graphs import cut_space_basis, cycle_space_basis, incidence_matrix

G = nx.petersen_graph()

M, nodes, edges = incidence_matrix(G)
cycles = cycle_space_basis(G)
cuts = cut_space_basis(G)

print("Incidence matrix:", M.shape)
print("Rank over GF(2):", M.rank())
print("Cycle space dimension:", len(cycles), "(m - n + c =", G.number_of_edges() - G.number_of_nodes() + 1, ")")
print("Cut space dimension:", len(cuts))
for cyc in cycles:
    print("  cycle:", cyc)
