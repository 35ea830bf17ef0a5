"""
    Export to NetworkX and plot flow graphs
"""

from matplotlib import pyplot as plt
import networkx as nx


def to_networkx(graph):
    """
        DiGraph of the original edges with capacity and flow attributes.
        Parallel edges are folded into one by summing.
    """
    nx_graph = nx.DiGraph()
    nx_graph.add_nodes_from(sorted(graph.vertices))
    for edge in graph.iter_edges(include_reverse=False):
        if nx_graph.has_edge(edge.source, edge.target):
            data = nx_graph[edge.source][edge.target]
            data["capacity"] += edge.original_capacity
            data["flow"] += edge.flow
        else:
            nx_graph.add_edge(edge.source, edge.target,
                              capacity=edge.original_capacity, flow=edge.flow)
    return nx_graph


def visualize_flow(graph, fname="flow_graph.png"):
    """
        Draw graph with "flow/capacity" labels, saturated edges in red
    """
    nx_graph = to_networkx(graph)
    pos = nx.spring_layout(nx_graph, seed=0)

    edge_colors = ["red" if data["flow"] == data["capacity"] and data["capacity"] > 0 else "gray"
                   for _, _, data in nx_graph.edges(data=True)]
    edge_labels = {(u, v): "{}/{}".format(data["flow"], data["capacity"])
                   for u, v, data in nx_graph.edges(data=True)}
    node_colors = ["lightgreen" if node == graph.source else
                   "salmon" if node == graph.target else "lightblue"
                   for node in nx_graph.nodes()]

    fig, ax = plt.subplots(figsize=(10, 8))
    nx.draw(nx_graph, pos, ax=ax, with_labels=True, node_color=node_colors,
            node_size=600, font_size=14, edge_color=edge_colors, arrows=True)
    nx.draw_networkx_edge_labels(nx_graph, pos, edge_labels=edge_labels, ax=ax)
    ax.set_title("Flow {} -> {}".format(graph.source, graph.target))
    fig.savefig(fname)
    plt.close(fig)
    return fname
