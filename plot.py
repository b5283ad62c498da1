import matplotlib.pyplot as plt
import networkx as nx
import seaborn as sns

from village_state import carried


def show_graph_structure(graph, state=None, savefile=None):
    """
    Draws the village road graph.
    If a state is given, the robot location and parcel pickups are highlighted.
    """
    fig, ax = plt.subplots(figsize=(9, 7))
    layout = nx.spring_layout(graph.G, seed=7)

    colors = []
    for place in graph.G.nodes:
        if state is not None and place == state.place:
            colors.append("tab:red")
        elif state is not None and any(p.place == place for p in state.parcels):
            colors.append("tab:orange")
        else:
            colors.append("lightsteelblue")

    nx.draw_networkx(graph.G, pos=layout, ax=ax, node_color=colors,
                     node_size=1400, font_size=8, edge_color="gray")

    title = "Village roads"
    if state is not None:
        title += f" (robot at {state.place}, {len(state.parcels)} parcels, {len(carried(state))} on board)"
    ax.set_title(title)
    ax.set_axis_off()
    plt.tight_layout()
    if savefile:
        plt.savefig(savefile, dpi=300)
    plt.show()


def plot_mean_turns_per_robot(df, savefile="mean_turns_per_robot.png"):
    sns.set(style="whitegrid")
    plt.figure(figsize=(8, 5))
    mean_vals = df.groupby("robot")["turns"].mean().sort_values()
    sns.barplot(x=mean_vals.index, y=mean_vals.values, palette="Set2")
    plt.ylabel("Mean turns per task (↓ is better)")
    plt.title("Mean Turns per Robot")
    plt.tight_layout()
    plt.savefig(savefile, dpi=300)
    plt.show()

    print("\nAverage turns per robot:")
    print(mean_vals.round(3).to_string())
    print("-" * 50)


def plot_turn_distribution(df, savefile="turn_distribution.png"):
    sns.set(style="whitegrid")
    plt.figure(figsize=(10, 5))
    order = df.groupby("robot")["turns"].mean().sort_values().index
    sns.boxplot(data=df, x="robot", y="turns", order=order, palette="Set2")
    plt.xlabel("Robot")
    plt.ylabel("Turns to deliver all parcels")
    plt.title("Turn Distribution over Shared Tasks")
    plt.tight_layout()
    plt.savefig(savefile, dpi=300)
    plt.show()
